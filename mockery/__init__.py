"""mockery - partial mocks with automatic spies for unittest.mock and pytest-mock."""

from mockery.builder import Extension, MockObject, extend, of
from mockery.console import print_mock, render_mock
from mockery.core.enums import SpyFramework
from mockery.core.errors import (
    MockerNotBoundError,
    MockeryError,
    UnsupportedEnvironmentError,
)
from mockery.spies import SpyHelper, configure, get_spy_helper, reset, restore
from mockery.static import mock_static, noop, spy_on

__all__ = [
    "Extension",
    "MockObject",
    "MockerNotBoundError",
    "MockeryError",
    "SpyFramework",
    "SpyHelper",
    "UnsupportedEnvironmentError",
    "configure",
    "extend",
    "get_spy_helper",
    "mock_static",
    "noop",
    "of",
    "print_mock",
    "render_mock",
    "reset",
    "restore",
    "spy_on",
]
