"""Core enums for mockery."""

from enum import StrEnum


class SpyFramework(StrEnum):
    """Call-recording ecosystems a spy helper can be built for."""

    UNITTEST = "unittest"
    PYTEST_MOCK = "pytest-mock"
