"""Spies installed directly on existing classes, modules and objects."""

import logging
from collections.abc import Callable
from typing import Any

from mockery.spies import get_spy_helper

logger = logging.getLogger(__name__)


def mock_static(owner: object, name: str, fake: Callable[..., Any]) -> Any:
    """Replace ``owner.name`` with a new spy that calls ``fake``.

    The original implementation is never invoked. Every call installs a
    fresh spy, so call history starts empty again. When set on a class, the
    spy is called without ``self``/``cls``.

    Args:
        owner: Class (or module, or object) owning the member
        name: Member to replace; must already exist
        fake: Replacement implementation

    Returns:
        The installed spy

    Raises:
        AttributeError: If ``owner`` has no member ``name``
    """
    if not hasattr(owner, name):
        raise AttributeError(f"{owner!r} has no member {name!r} to mock")
    logger.debug("Mocking %r.%s", owner, name)
    return get_spy_helper().spy_and_call_fake(owner, name, fake)


def spy_on(owner: object, name: str) -> Any:
    """Record calls to ``owner.name`` while keeping its real behavior.

    Raises:
        AttributeError: If ``owner`` has no member ``name``
    """
    if not hasattr(owner, name):
        raise AttributeError(f"{owner!r} has no member {name!r} to spy on")
    logger.debug("Spying on %r.%s", owner, name)
    return get_spy_helper().spy_and_call_through(owner, name)


def noop(*args: Any, **kwargs: Any) -> None:
    """Accept anything, do nothing. Handy as a fake: ``of(close=noop)``."""
