"""Root test fixtures shared across the test suite.

Unit-specific fixtures live in tests/unit/conftest.py.
"""

from collections.abc import Generator
from contextvars import ContextVar

import pytest
from pytest_mock import MockerFixture

import mockery
from mockery.core.enums import SpyFramework
from mockery.spies import pytest_mock_helper
from mockery.spies.pytest_mock_helper import bound_mocker

# ============================================================================
# Spy Helper Isolation (autouse)
# ============================================================================


@pytest.fixture(autouse=True)
def reset_spy_helper() -> Generator[None]:
    """Forget configured and detected spy helpers around each test."""
    mockery.reset()
    yield
    mockery.reset()


# ============================================================================
# Framework Fixtures
# ============================================================================


@pytest.fixture(params=list(SpyFramework), ids=str)
def spy_framework(
    request: pytest.FixtureRequest, mocker: MockerFixture
) -> Generator[SpyFramework]:
    """Run the test once per supported spy framework.

    The pytest-mock variant gets this test's mocker bound explicitly, so the
    suite does not depend on the installed plugin entry point.
    """
    mockery.configure(request.param)
    with bound_mocker(mocker):
        yield request.param


@pytest.fixture
def unbound_mocker(monkeypatch: pytest.MonkeyPatch) -> None:
    """Hide any mocker bound by the mockery plugin."""
    monkeypatch.setattr(pytest_mock_helper, "_active_mocker", ContextVar("mocker", default=None))


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove the framework override from the environment."""
    monkeypatch.delenv("MOCKERY_SPY_FRAMEWORK", raising=False)

