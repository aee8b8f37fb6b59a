"""Environment variable handling."""

from __future__ import annotations

import logging
import os

from mockery.core.constants import DETECTION
from mockery.core.enums import SpyFramework
from mockery.core.errors import UnsupportedEnvironmentError

logger = logging.getLogger(__name__)


def parse_framework(value: str) -> SpyFramework:
    """Resolve a framework name to its enum member.

    Args:
        value: Framework name, e.g. "unittest" or "pytest-mock".
            Case and surrounding whitespace are ignored; underscores are
            accepted in place of dashes.

    Returns:
        The matching SpyFramework.

    Raises:
        UnsupportedEnvironmentError: If the name is not a known framework.
    """
    normalized = value.strip().lower().replace("_", "-")
    try:
        return SpyFramework(normalized)
    except ValueError:
        known = ", ".join(f.value for f in SpyFramework)
        raise UnsupportedEnvironmentError(
            f"Unknown spy framework {value!r} (expected one of: {known})"
        ) from None


def framework_from_env() -> SpyFramework | None:
    """Read the framework override from the environment.

    Returns:
        The framework named by MOCKERY_SPY_FRAMEWORK, or None when unset/empty.

    Raises:
        UnsupportedEnvironmentError: If the variable names an unknown framework.
    """
    value = os.getenv(DETECTION.env_var)
    if not value:
        return None
    logger.debug("%s=%s", DETECTION.env_var, value)
    return parse_framework(value)
