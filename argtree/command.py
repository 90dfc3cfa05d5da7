# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CommandNode`, the building block of an Argtree command tree.

A command tree is made of two kinds of node:

- Leaf: carries an `ArgumentSpec` and, optionally, a handler that receives the
  resolved arguments. This is what actually runs.
- Category: carries an ordered tuple of named child nodes and nothing else.
  Its only job is routing: the next token selects one of its children.

Trees are validated as they are assembled. Sibling names must be unique,
non-empty and free of whitespace, only leaves may carry a handler, and a
tree may be at most `MAX_DEPTH` categories deep. Nodes are frozen, so an
assembled tree can be shared freely and dispatched any number of times.

Example Usage:
    root = category(
        "tool",
        [
            leaf("serve", [flag("daemon").short("d")], handler=serve),
            category(
                "db",
                [category("migrate", [leaf("up", [option("steps", int, 1)])])],
            ),
        ],
    )
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator

from argtree.exceptions import CommandTreeError, MaxDepthExceededError
from argtree.spec.argument_spec import ArgumentSpec
from argtree.spec.field import FieldBuilder, FieldSpec

if TYPE_CHECKING:
    from argtree.context import InvocationContext
    from argtree.spec.parsed_arguments import ParsedArguments

Handler = Callable[["ParsedArguments", "InvocationContext"], Any]

MAX_DEPTH = 5


def validate_command_name(name: Any) -> str:
    if not isinstance(name, str) or not name:
        raise CommandTreeError("Command name must be a non-empty string")
    if any(char.isspace() for char in name):
        raise CommandTreeError(f"Command name '{name}' must not contain whitespace")
    return name


@dataclass(frozen=True)
class CommandNode:
    """
    A node of the command tree: either a leaf or a category.

    Attributes:
        name (str): The token that selects this node under its parent.
        spec (ArgumentSpec | None): The leaf's accepted fields. `None` marks a
            category.
        children (tuple[CommandNode, ...]): A category's sub-commands, in
            declared order. Empty for a leaf.
        handler (Handler | None): Called with the resolved arguments and an
            `InvocationContext` when a leaf is dispatched.
        help (str): One-line description for help renderers.
        hidden (bool): True to hide the command from help output.
    """

    name: str
    spec: ArgumentSpec | None = None
    children: tuple[CommandNode, ...] = ()
    handler: Handler | None = None
    help: str = ""
    hidden: bool = False
    _depth: int = field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        validate_command_name(self.name)
        object.__setattr__(self, "children", tuple(self.children))
        if self.spec is not None:
            if not isinstance(self.spec, ArgumentSpec):
                raise CommandTreeError(
                    f"Leaf '{self.name}' expects an ArgumentSpec, "
                    f"got {type(self.spec).__name__}"
                )
            if self.children:
                raise CommandTreeError(
                    f"Command '{self.name}' cannot have both an ArgumentSpec and "
                    "sub-commands"
                )
            if self.handler is not None and not callable(self.handler):
                raise CommandTreeError(f"Handler for '{self.name}' must be callable")
            return

        if self.handler is not None:
            raise CommandTreeError(
                f"Category '{self.name}' cannot have a handler; attach it to a leaf"
            )
        if not self.children:
            raise CommandTreeError(f"Category '{self.name}' has no sub-commands")
        seen: set[str] = set()
        for child in self.children:
            if not isinstance(child, CommandNode):
                raise CommandTreeError(
                    f"Category '{self.name}' expects CommandNode children, "
                    f"got {type(child).__name__}"
                )
            if child.name in seen:
                raise CommandTreeError(
                    f"Duplicate command name '{child.name}' under '{self.name}'"
                )
            seen.add(child.name)

        depth = 1 + max(child.depth for child in self.children)
        if depth > MAX_DEPTH:
            raise MaxDepthExceededError(
                f"Command tree under '{self.name}' is {depth} categories deep; "
                f"the maximum is {MAX_DEPTH}"
            )
        object.__setattr__(self, "_depth", depth)

    @property
    def is_leaf(self) -> bool:
        return self.spec is not None

    @property
    def is_category(self) -> bool:
        return self.spec is None

    @property
    def depth(self) -> int:
        """Number of category levels from this node down, 0 for a leaf."""
        return self._depth

    @property
    def child_names(self) -> tuple[str, ...]:
        return tuple(child.name for child in self.children)

    @property
    def visible_children(self) -> tuple[CommandNode, ...]:
        return tuple(child for child in self.children if not child.hidden)

    def child(self, name: str) -> CommandNode | None:
        """Return the direct child named exactly `name`, or None."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def walk(self, path: str = "") -> Iterator[tuple[str, CommandNode]]:
        """Yield `(path, node)` for every leaf below this node, depth first."""
        if self.is_leaf:
            yield path, self
            return
        for child in self.children:
            child_path = f"{path} {child.name}".strip()
            yield from child.walk(child_path)

    def __str__(self) -> str:
        if self.is_leaf:
            return f"Leaf(name={self.name!r}, spec={self.spec})"
        return f"Category(name={self.name!r}, children={list(self.child_names)})"


def leaf(
    name: str,
    spec: ArgumentSpec | Iterable[FieldSpec | FieldBuilder] | None = None,
    handler: Handler | None = None,
    *,
    help: str = "",
    hidden: bool = False,
) -> CommandNode:
    """Create a leaf command from an ArgumentSpec or a list of fields."""
    if not isinstance(spec, ArgumentSpec):
        spec = ArgumentSpec(spec or ())
    return CommandNode(name=name, spec=spec, handler=handler, help=help, hidden=hidden)


def category(
    name: str,
    children: Iterable[CommandNode],
    *,
    help: str = "",
    hidden: bool = False,
) -> CommandNode:
    """Create a category command routing to `children`."""
    return CommandNode(name=name, children=tuple(children), help=help, hidden=hidden)
