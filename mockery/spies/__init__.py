"""Spy helpers: one per supported call-recording framework."""

from mockery.spies.base import SpyHelper
from mockery.spies.detector import detect_framework
from mockery.spies.factory import (
    configure,
    create_spy_helper,
    get_spy_helper,
    reset,
    restore,
)

__all__ = [
    "SpyHelper",
    "configure",
    "create_spy_helper",
    "detect_framework",
    "get_spy_helper",
    "reset",
    "restore",
]
