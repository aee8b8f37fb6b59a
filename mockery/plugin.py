"""pytest plugin binding each test's ``mocker`` fixture to mockery.

Registered through the ``pytest11`` entry point, so it loads automatically
once mockery is installed.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager

import pytest

logger = logging.getLogger(__name__)


@contextmanager
def mocker_binding(request: pytest.FixtureRequest) -> Generator[None]:
    """Bind the test's ``mocker`` for the duration of the block.

    Binding is skipped when pytest-mock is not loaded. Members replaced
    through mock_static or spy_on are put back when the block exits.
    """
    from mockery.spies import restore

    try:
        if not request.config.pluginmanager.hasplugin("pytest_mock"):
            yield
            return

        from mockery.spies.pytest_mock_helper import bound_mocker

        mocker = request.getfixturevalue("mocker")
        logger.debug("Binding mocker for %s", request.node.nodeid)
        with bound_mocker(mocker):
            yield
    finally:
        restore()


@pytest.fixture(autouse=True)
def _mockery_mocker(request: pytest.FixtureRequest) -> Generator[None]:
    """Make mockery create spies through this test's ``mocker``."""
    with mocker_binding(request):
        yield
