"""Exception types raised by mockery."""


class MockeryError(Exception):
    """Base class for all mockery errors."""


class UnsupportedEnvironmentError(MockeryError):
    """No supported call-recording framework could be resolved."""


class MockerNotBoundError(MockeryError):
    """The pytest-mock helper was used without an active ``mocker`` fixture."""
