"""Tests for spy framework detection."""

from __future__ import annotations

import sys
from types import ModuleType
from unittest.mock import patch

import pytest

from mockery.core.constants import DetectionConfig
from mockery.core.enums import SpyFramework
from mockery.core.errors import UnsupportedEnvironmentError
from mockery.spies.detector import detect_framework

MARKERS = (
    ("mockery_fake_pytest_mock", SpyFramework.PYTEST_MOCK),
    ("mockery_fake_unittest", SpyFramework.UNITTEST),
)


@pytest.fixture
def fake_markers(monkeypatch: pytest.MonkeyPatch) -> None:
    """Detect against marker modules that are not really loaded."""
    monkeypatch.setattr("mockery.spies.detector.DETECTION", DetectionConfig(module_markers=MARKERS))


def _load(monkeypatch: pytest.MonkeyPatch, name: str) -> None:
    monkeypatch.setitem(sys.modules, name, ModuleType(name))


class TestDetectFramework:
    """Tests for detect_framework."""

    def test_detects_pytest_mock_in_this_process(self, clean_env: None):
        """pytest-mock is loaded while this suite runs."""
        assert detect_framework() == SpyFramework.PYTEST_MOCK

    def test_detects_unittest(self, clean_env: None, fake_markers: None, monkeypatch):
        """A loaded unittest marker selects unittest."""
        _load(monkeypatch, "mockery_fake_unittest")

        assert detect_framework() == SpyFramework.UNITTEST

    def test_first_marker_wins(self, clean_env: None, fake_markers: None, monkeypatch):
        """pytest-mock takes precedence over unittest when both are loaded."""
        _load(monkeypatch, "mockery_fake_unittest")
        _load(monkeypatch, "mockery_fake_pytest_mock")

        assert detect_framework() == SpyFramework.PYTEST_MOCK

    def test_raises_when_nothing_detected(self, clean_env: None, fake_markers: None):
        """No loaded marker is fatal."""
        with pytest.raises(UnsupportedEnvironmentError, match="MOCKERY_SPY_FRAMEWORK"):
            detect_framework()

    @patch.dict("os.environ", {"MOCKERY_SPY_FRAMEWORK": "unittest"})
    def test_environment_wins_over_modules(self, fake_markers: None, monkeypatch):
        """An explicit environment setting beats loaded modules."""
        _load(monkeypatch, "mockery_fake_pytest_mock")

        assert detect_framework() == SpyFramework.UNITTEST

    @patch.dict("os.environ", {"MOCKERY_SPY_FRAMEWORK": "jasmine"})
    def test_unknown_environment_value_raises(self):
        """Unknown framework names are rejected."""
        with pytest.raises(UnsupportedEnvironmentError, match="jasmine"):
            detect_framework()

    def test_result_is_cached(self, clean_env: None, fake_markers: None, monkeypatch):
        """Detection runs once per process until the cache is cleared."""
        _load(monkeypatch, "mockery_fake_unittest")
        assert detect_framework() == SpyFramework.UNITTEST

        _load(monkeypatch, "mockery_fake_pytest_mock")
        assert detect_framework() == SpyFramework.UNITTEST

        detect_framework.cache_clear()
        assert detect_framework() == SpyFramework.PYTEST_MOCK
