"""Recursive construction and in-place extension of mock objects.

Overrides are dispatched purely on their runtime kind:

- mappings recurse into a nested MockObject
- lists and tuples are rebuilt element by element
- functions become spies of the active framework
- existing spies and MockObjects, and every other value, are installed as-is
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any, Generic, TypeAlias, TypeVar, overload

from mockery.spies import get_spy_helper
from mockery.spies.base import SpyHelper

logger = logging.getLogger(__name__)

Overrides: TypeAlias = Mapping[str, Any]

T = TypeVar("T")


class MockObject(SimpleNamespace):
    """Stand-in object holding exactly the members supplied so far.

    Reading a member that was never supplied raises AttributeError. Mocks
    compare and hash by identity, so two mocks with equal members stay
    distinguishable in call assertions, sets and dict keys.
    """

    __eq__ = object.__eq__
    __hash__ = object.__hash__


def _combine(overrides: Overrides | MockObject | None, members: dict[str, Any]) -> dict[str, Any]:
    """Merge a positional overrides mapping with keyword members (keywords win)."""
    if overrides is None:
        return members
    if isinstance(overrides, MockObject):
        overrides = vars(overrides)
    if not isinstance(overrides, Mapping):
        raise TypeError(f"Overrides must be a mapping, got {type(overrides).__name__}")
    return {**overrides, **members}


def _mock_value(value: Any, existing: Any, path: str, helper: SpyHelper) -> Any:
    if isinstance(value, MockObject):
        return value
    if isinstance(value, Mapping):
        target = existing if isinstance(existing, MockObject) else MockObject()
        return _merge(target, value, path, helper)
    if isinstance(value, (list, tuple)):
        return _mock_sequence(value, existing, path, helper)
    if callable(value) and not isinstance(value, type):
        if helper.is_spy(value):
            return value
        return helper.make_fake(value, name=path)
    return value


def _mock_sequence(
    values: list[Any] | tuple[Any, ...], existing: Any, path: str, helper: SpyHelper
) -> list[Any] | tuple[Any, ...]:
    previous = existing if isinstance(existing, (list, tuple)) else ()
    items = [
        _mock_value(item, previous[i] if i < len(previous) else None, f"{path}[{i}]", helper)
        for i, item in enumerate(values)
    ]
    if isinstance(values, tuple):
        return tuple(items)
    if isinstance(existing, list):
        # Update in place so references held by code under test stay current
        existing[:] = items
        return existing
    return items


def _merge(target: MockObject, overrides: Overrides, path: str, helper: SpyHelper) -> MockObject:
    members = vars(target)
    for name, value in list(overrides.items()):
        if not isinstance(name, str):
            raise TypeError(f"Member names must be strings, got {name!r} at {path or '<root>'}")
        member_path = f"{path}.{name}" if path else name
        setattr(target, name, _mock_value(value, members.get(name), member_path, helper))
    return target


@overload
def of(overrides: Overrides | None = None, /, **members: Any) -> MockObject: ...


@overload
def of(shape: type[T], overrides: Overrides | None = None, /, **members: Any) -> T: ...


def of(*args: Any, **members: Any) -> Any:
    """Build a mock from sparse overrides.

    Functions anywhere in the overrides are replaced by spies that call
    through to them; nested mappings and sequences are built recursively.
    Members not supplied are absent from the mock.

    Args:
        *args: Optional shape class (used only for static typing), then an
            optional mapping of member overrides
        **members: Member overrides; these win over the mapping

    Returns:
        A new MockObject

    Raises:
        UnsupportedEnvironmentError: If no spy framework can be resolved
        TypeError: If the overrides are not a mapping or a name is not a string

    Example::

        repo = of(UserRepo, get=lambda user_id: User(id=user_id))
        service = UserService(repo)
        service.load(1)
        repo.get.assert_called_once_with(1)
    """
    if args and isinstance(args[0], type):
        args = args[1:]
    if len(args) > 1:
        raise TypeError(f"of() takes at most one overrides mapping ({len(args)} given)")
    overrides = _combine(args[0] if args else None, members)
    helper = get_spy_helper()
    logger.debug("Building mock with members: %s", list(overrides))
    return _merge(MockObject(), overrides, "", helper)


class Extension(Generic[T]):
    """Pending in-place extension of a mock; apply it with ``with_``."""

    def __init__(self, mock: T):
        self.mock = mock

    def with_(self, overrides: Overrides | None = None, /, **members: Any) -> T:
        """Merge overrides into the mock in place.

        Supplied functions and values replace the current member (a replaced
        spy's history is gone with it). Nested mappings merge into the
        existing nested mock, keeping members they do not mention. Members
        not mentioned at all are untouched, spies and history included.

        Returns:
            The same mock, for chaining
        """
        overrides = _combine(overrides, members)
        logger.debug("Extending mock with members: %s", list(overrides))
        _merge(self.mock, overrides, "", get_spy_helper())  # type: ignore[arg-type]
        return self.mock


def extend(mock: T) -> Extension[T]:
    """Start extending an existing mock: ``extend(mock).with_(name=value)``.

    Raises:
        TypeError: If ``mock`` was not built by ``of``
    """
    if not isinstance(mock, MockObject):
        raise TypeError(f"Can only extend mocks built by mockery.of, got {type(mock).__name__}")
    return Extension(mock)
