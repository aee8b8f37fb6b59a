"""Spy helper resolution and process-wide selection."""

from __future__ import annotations

import logging
from functools import lru_cache

from mockery.core.enums import SpyFramework
from mockery.core.env import parse_framework
from mockery.spies.base import SpyHelper
from mockery.spies.detector import detect_framework

logger = logging.getLogger(__name__)

# Explicit selection made through configure(); takes precedence over detection
_configured: SpyHelper | None = None


def create_spy_helper(framework: SpyFramework) -> SpyHelper:
    """Build a new helper for ``framework``.

    Backends are imported lazily so that loading mockery does not itself
    pull a framework into ``sys.modules`` and skew detection.
    """
    match framework:
        case SpyFramework.UNITTEST:
            from mockery.spies.unittest_helper import UnittestSpyHelper

            return UnittestSpyHelper()
        case SpyFramework.PYTEST_MOCK:
            from mockery.spies.pytest_mock_helper import PytestMockSpyHelper

            return PytestMockSpyHelper()


@lru_cache(maxsize=1)
def _detected_spy_helper() -> SpyHelper:
    framework = detect_framework()
    logger.debug("Creating spy helper for %s", framework)
    return create_spy_helper(framework)


def get_spy_helper() -> SpyHelper:
    """Get the active spy helper.

    Returns:
        The helper set with configure(), else the memoized helper for the
        detected framework

    Raises:
        UnsupportedEnvironmentError: If no framework is configured or detected
    """
    if _configured is not None:
        return _configured
    return _detected_spy_helper()


def configure(framework: SpyFramework | str | SpyHelper) -> SpyHelper:
    """Select the spy helper explicitly, bypassing detection.

    Args:
        framework: A framework tag or name ("unittest", "pytest-mock"), or a
            custom object implementing the SpyHelper protocol

    Returns:
        The helper now in use

    Raises:
        UnsupportedEnvironmentError: If a framework name is unknown
        TypeError: If the object is neither a framework nor a SpyHelper
    """
    global _configured
    if isinstance(framework, str):
        helper = create_spy_helper(parse_framework(framework))
    elif isinstance(framework, SpyHelper):
        helper = framework
    else:
        raise TypeError(f"Expected a framework name or SpyHelper, got {framework!r}")
    if _configured is not None and _configured is not helper:
        _configured.restore_all()
    logger.debug("Configured spy helper: %r", helper)
    _configured = helper
    return helper


def restore() -> None:
    """Put back every member replaced through mock_static or spy_on.

    Only helpers already in use are touched; this never triggers detection.
    """
    if _configured is not None:
        _configured.restore_all()
    if _detected_spy_helper.cache_info().currsize:
        _detected_spy_helper().restore_all()


def reset() -> None:
    """Restore replaced members, then forget configured and detected helpers."""
    global _configured
    restore()
    _configured = None
    _detected_spy_helper.cache_clear()
    detect_framework.cache_clear()
