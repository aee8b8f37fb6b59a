"""Rich rendering of mock structure for debugging tests."""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme
from rich.tree import Tree

from mockery.builder import MockObject
from mockery.spies import get_spy_helper

# Named styles for semantic consistency
custom_theme = Theme({
    "heading": "bold cyan",
    "member": "cyan",
    "spy": "green",
    "muted": "dim",
})

# Singleton console instance
console = Console(theme=custom_theme)


def _label(name: str, value: Any) -> str:
    if isinstance(value, MockObject):
        return f"[member]{escape(name)}[/member]"
    if isinstance(value, (list, tuple)):
        return f"[member]{escape(name)}[/member] [muted]{type(value).__name__}[{len(value)}][/muted]"
    if get_spy_helper().is_spy(value):
        label = f"[member]{escape(name)}[/member] [spy]spy[/spy]"
        calls = getattr(value, "call_count", None)
        return label if calls is None else f"{label} [muted]({calls} calls)[/muted]"
    return f"[member]{escape(name)}[/member] = {escape(repr(value))}"


def _add_children(tree: Tree, value: Any) -> None:
    if isinstance(value, MockObject):
        items = list(vars(value).items())
    elif isinstance(value, (list, tuple)):
        items = [(f"[{i}]", item) for i, item in enumerate(value)]
    else:
        return
    for name, item in items:
        _add_children(tree.add(_label(name, item)), item)


def render_mock(mock: MockObject, *, title: str = "Mock") -> Tree:
    """Render a mock's members as a tree.

    Nested mocks and sequences become branches, spies show their call
    count, and plain values show their repr.
    """
    tree = Tree(f"[heading]{escape(title)}[/heading]")
    _add_children(tree, mock)
    if not vars(mock):
        tree.add("[muted](no members)[/muted]")
    return tree


def print_mock(mock: MockObject, *, title: str = "Mock") -> None:
    """Print the tree from render_mock on the shared console."""
    console.print(render_mock(mock, title=title))
