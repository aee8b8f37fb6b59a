"""Centralized configuration constants."""

from dataclasses import dataclass

from mockery.core.enums import SpyFramework


@dataclass(frozen=True)
class DetectionConfig:
    """Framework detection settings.

    Markers are checked in order; the first module found in ``sys.modules``
    decides the framework.
    """

    env_var: str = "MOCKERY_SPY_FRAMEWORK"
    module_markers: tuple[tuple[str, SpyFramework], ...] = (
        ("pytest_mock", SpyFramework.PYTEST_MOCK),
        ("unittest.mock", SpyFramework.UNITTEST),
        ("mock", SpyFramework.UNITTEST),  # standalone backport
    )


# Singleton configs
DETECTION = DetectionConfig()
