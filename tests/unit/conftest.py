"""Unit test fixtures.

Shape classes that tests pass to ``mockery.of`` are declared in the test
modules themselves; they only inform static typing.
"""

import pytest


@pytest.fixture
def foo_class() -> type:
    """A fresh class per test, so member patches never leak between tests."""

    class WithStatic:
        @staticmethod
        def static() -> str:
            raise RuntimeError("original implementation called")

        def greet(self, name: str) -> str:
            return f"hello {name}"

    return WithStatic
