"""Tests for mockery.core.errors module."""

import pytest

from mockery.core import MockerNotBoundError, MockeryError, UnsupportedEnvironmentError


class TestMockeryError:
    """Tests for the error hierarchy."""

    @pytest.mark.parametrize("error", [UnsupportedEnvironmentError, MockerNotBoundError])
    def test_inherits_from_mockery_error(self, error):
        """Every mockery error can be caught as MockeryError."""
        assert issubclass(error, MockeryError)

    def test_inherits_from_exception(self):
        """Should be a subclass of Exception."""
        assert issubclass(MockeryError, Exception)

    def test_can_wrap_other_exceptions(self):
        """Should support exception chaining."""
        original = ValueError("Original error")

        with pytest.raises(UnsupportedEnvironmentError) as exc_info:
            raise UnsupportedEnvironmentError("Wrapped") from original

        assert exc_info.value.__cause__ is original
