"""Spy helper backed by pytest-mock's ``mocker`` fixture.

The helper itself is a process singleton, but ``MockerFixture`` is created
per test. The active fixture is bound into a context variable for the
duration of each test (see ``mockery.plugin``); every patch made through it
is undone by pytest-mock at teardown.
"""

from __future__ import annotations

import inspect
import logging
import unittest.mock
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from pytest_mock import MockerFixture

from mockery.core.enums import SpyFramework
from mockery.core.errors import MockerNotBoundError

logger = logging.getLogger(__name__)

_active_mocker: ContextVar[MockerFixture | None] = ContextVar("mocker", default=None)


@contextmanager
def bound_mocker(mocker: MockerFixture) -> Generator[MockerFixture]:
    """Make ``mocker`` the fixture used by the pytest-mock helper.

    Bindings nest; leaving the block restores the previous one.
    """
    token = _active_mocker.set(mocker)
    try:
        yield mocker
    finally:
        _active_mocker.reset(token)


def get_active_mocker() -> MockerFixture:
    """Get the bound mocker fixture.

    Raises:
        MockerNotBoundError: If called outside a test with a bound mocker.
    """
    mocker = _active_mocker.get()
    if mocker is None:
        raise MockerNotBoundError(
            "pytest-mock is active but no mocker fixture is bound; create mocks "
            "inside a test with the mockery pytest plugin loaded, or call "
            "mockery.configure('unittest')"
        )
    return mocker


class PytestMockSpyHelper:
    """Creates spies through the currently bound ``MockerFixture``."""

    framework = SpyFramework.PYTEST_MOCK

    @property
    def mocker(self) -> MockerFixture:
        return get_active_mocker()

    def make_fake(self, fake: Callable[..., Any], *, name: str | None = None) -> Any:
        stub = self.mocker.stub(name=name)
        stub.side_effect = fake
        return stub

    def make_call_through(
        self, original: Callable[..., Any], *, name: str | None = None
    ) -> Any:
        return self.mocker.MagicMock(name=name, wraps=original)

    def spy_and_call_fake(self, owner: object, name: str, fake: Callable[..., Any]) -> Any:
        spy = self.mocker.patch.object(owner, name, side_effect=fake)
        logger.debug("Patched %r.%s with fake spy (restored at teardown)", owner, name)
        return spy

    def spy_and_call_through(self, owner: object, name: str) -> Any:
        spy = self.mocker.spy(owner, name)
        logger.debug("Spying on %r.%s (restored at teardown)", owner, name)
        return spy

    def restore_all(self) -> None:
        """Nothing to do: pytest-mock undoes its patches at test teardown."""

    def is_spy(self, value: object) -> bool:
        # Needs no bound fixture, so spies can be inspected outside a test
        mocker = _active_mocker.get()
        mock_module = mocker.mock_module if mocker is not None else unittest.mock
        non_callable_mock = mock_module.NonCallableMock
        if isinstance(value, non_callable_mock):
            return True
        return inspect.isfunction(value) and isinstance(
            getattr(value, "mock", None), non_callable_mock
        )
