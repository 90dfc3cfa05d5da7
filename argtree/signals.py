# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by the Argtree CLI framework.

Signals interrupt resolution or dispatch without being treated as failures.
All signals inherit from `FlowSignal`, a subclass of `BaseException`, so they
pass through `except Exception` blocks in handlers and hooks untouched.

Signals:
- HelpRequested: `--help`/`-h` was seen, or a category was reached with no
  further tokens. Carries the node and command path a help renderer needs.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from argtree.command import CommandNode
    from argtree.spec.argument_spec import ArgumentSpec


class FlowSignal(BaseException):
    """Base class for all flow control signals in Argtree.

    These are not errors. They are terminal control states that the process
    entry point maps to an exit code.
    """


class HelpRequested(FlowSignal):
    """Raised when help output should be shown instead of running a command.

    Attributes:
        node (CommandNode | None): The command node help was requested for.
            `None` when a bare `ArgumentSpec` was resolved outside a tree.
        path (str): Space-joined command names leading to `node`.
        spec (ArgumentSpec | None): The leaf spec, when help targets a leaf.
    """

    def __init__(
        self,
        node: CommandNode | None = None,
        path: str = "",
        spec: ArgumentSpec | None = None,
        message: str = "Help requested.",
    ) -> None:
        super().__init__(message)
        self.node = node
        self.path = path
        self.spec = spec if spec is not None else getattr(node, "spec", None)

    def as_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "node": self.node.name if self.node is not None else None,
            "is_leaf": self.spec is not None,
        }
