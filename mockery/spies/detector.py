"""One-time detection of the call-recording framework loaded in this process."""

import logging
import sys
from functools import lru_cache

from mockery.core.constants import DETECTION
from mockery.core.enums import SpyFramework
from mockery.core.env import framework_from_env
from mockery.core.errors import UnsupportedEnvironmentError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def detect_framework() -> SpyFramework:
    """Detect which spy framework the hosting test environment uses.

    An explicit MOCKERY_SPY_FRAMEWORK wins; otherwise the first loaded module
    from DETECTION.module_markers decides. The result is cached for the
    process lifetime (call ``detect_framework.cache_clear()`` to detect again).

    Returns:
        The detected SpyFramework

    Raises:
        UnsupportedEnvironmentError: If no known framework is configured or loaded
    """
    if (framework := framework_from_env()) is not None:
        logger.debug("Spy framework from environment: %s", framework)
        return framework

    for module_name, framework in DETECTION.module_markers:
        if module_name in sys.modules:
            logger.debug("Detected spy framework %s (module %s loaded)", framework, module_name)
            return framework

    markers = ", ".join(name for name, _ in DETECTION.module_markers)
    raise UnsupportedEnvironmentError(
        f"No supported spy framework detected (looked for: {markers}); "
        f"import one, set {DETECTION.env_var} or call mockery.configure()"
    )
