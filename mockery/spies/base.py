"""Spy helper protocol shared by all call-recording backends."""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from mockery.core.enums import SpyFramework


@runtime_checkable
class SpyHelper(Protocol):
    """Protocol for call-recording backends.

    Implement this protocol to plug another spy library into mockery
    (see ``mockery.configure``). Every spy returned must record its calls
    in a form the backend's own assertion API understands.
    """

    framework: SpyFramework

    def make_fake(self, fake: Callable[..., Any], *, name: str | None = None) -> Any:
        """Create a spy that records each call and returns ``fake(*args, **kwargs)``.

        Args:
            fake: Implementation the spy forwards to
            name: Optional name used in the spy's repr and assertion messages

        Returns:
            A callable spy
        """
        ...

    def make_call_through(
        self, original: Callable[..., Any], *, name: str | None = None
    ) -> Any:
        """Create a spy that records each call and forwards to ``original``."""
        ...

    def spy_and_call_fake(
        self, owner: object, name: str, fake: Callable[..., Any]
    ) -> Any:
        """Replace ``owner.name`` with a new fake spy and return it."""
        ...

    def spy_and_call_through(self, owner: object, name: str) -> Any:
        """Replace ``owner.name`` with a call-through spy and return it."""
        ...

    def restore_all(self) -> None:
        """Put back every member this backend replaced."""
        ...

    def is_spy(self, value: object) -> bool:
        """Whether ``value`` already is a spy created by this backend."""
        ...
