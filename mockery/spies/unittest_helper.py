"""Spy helper backed by the standard library's unittest.mock."""

import inspect
import logging
from collections.abc import Callable
from typing import Any
from unittest import mock

from mockery.core.enums import SpyFramework

logger = logging.getLogger(__name__)


class UnittestSpyHelper:
    """Creates ``MagicMock`` spies.

    Member replacement goes through ``mock.patch.object``. The helper keeps
    one patcher per ``(owner, name)``: patching a member again stops the
    previous patcher first, and ``restore_all`` stops them all, putting the
    original members back.
    """

    framework = SpyFramework.UNITTEST

    def __init__(self) -> None:
        # Keyed by id(owner); each patcher holds a reference to its owner
        self._patchers: dict[tuple[int, str], Any] = {}

    def make_fake(self, fake: Callable[..., Any], *, name: str | None = None) -> mock.MagicMock:
        return mock.MagicMock(name=name, side_effect=fake)

    def make_call_through(
        self, original: Callable[..., Any], *, name: str | None = None
    ) -> mock.MagicMock:
        return mock.MagicMock(name=name, wraps=original)

    def _stop(self, owner: object, name: str) -> None:
        patcher = self._patchers.pop((id(owner), name), None)
        if patcher is not None:
            patcher.stop()

    def _start(self, owner: object, name: str, **kwargs: Any) -> Any:
        patcher = mock.patch.object(owner, name, **kwargs)
        spy = patcher.start()
        self._patchers[(id(owner), name)] = patcher
        return spy

    def spy_and_call_fake(self, owner: object, name: str, fake: Callable[..., Any]) -> Any:
        self._stop(owner, name)
        spy = self._start(owner, name, side_effect=fake)
        logger.debug("Patched %r.%s with fake spy", owner, name)
        return spy

    def spy_and_call_through(self, owner: object, name: str) -> Any:
        self._stop(owner, name)
        original = getattr(owner, name)
        # Autospec keeps plain functions bindable, so instance methods still get self
        autospec = inspect.ismethod(original) or inspect.isfunction(original)
        spy = self._start(owner, name, side_effect=original, autospec=autospec)
        logger.debug("Patched %r.%s with call-through spy", owner, name)
        return spy

    def restore_all(self) -> None:
        """Stop every patch this helper started, most recent first."""
        while self._patchers:
            (_, name), patcher = self._patchers.popitem()
            patcher.stop()
            logger.debug("Restored %s", name)

    def is_spy(self, value: object) -> bool:
        if isinstance(value, mock.NonCallableMock):
            return True
        # Autospecced functions carry their recording mock on ``.mock``
        return inspect.isfunction(value) and isinstance(
            getattr(value, "mock", None), mock.NonCallableMock
        )
