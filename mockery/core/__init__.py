"""Core enums, errors and configuration for mockery.

The leaf modules here have no imports from mockery outside core/.
"""

from mockery.core.constants import DETECTION, DetectionConfig
from mockery.core.enums import SpyFramework
from mockery.core.errors import (
    MockerNotBoundError,
    MockeryError,
    UnsupportedEnvironmentError,
)

__all__ = [
    "DETECTION",
    "DetectionConfig",
    "MockerNotBoundError",
    "MockeryError",
    "SpyFramework",
    "UnsupportedEnvironmentError",
]
