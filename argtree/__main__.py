"""
Argtree CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Usage:
    python -m argtree <config.yaml|config.toml> [tokens...]

Loads a command tree from a configuration file and dispatches the remaining
tokens through it. When the matched command has no handler, the resolved
values are printed as a table.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from rich import box
from rich.markup import escape
from rich.table import Table

from argtree.config import loader
from argtree.console import console
from argtree.dispatcher import (
    EXIT_CONSTRUCTION_ERROR,
    EXIT_OK,
    EXIT_PARSE_ERROR,
    DispatchResult,
    run_cli,
)
from argtree.exceptions import ConfigError
from argtree.signals import HelpRequested
from argtree.themes import OneColors
from argtree.utils import get_program_invocation, setup_logging


def bootstrap(config_path: Path) -> None:
    """Make handler modules next to the config file importable."""
    parent = str(config_path.resolve().parent)
    if parent not in sys.path:
        sys.path.insert(0, parent)


def show_commands(signal: HelpRequested) -> None:
    """List what can follow the command path carried by `signal`."""
    node = signal.node
    title = signal.path or (node.name if node is not None else "")
    table = Table(title=title, expand=False, box=box.SIMPLE)
    if signal.spec is not None:
        table.add_column("Field", style=f"bold {OneColors.CYAN}")
        table.add_column("Kind")
        table.add_column("Type")
        table.add_column("Default", style="dim")
        table.add_column("Env", style="dim")
        table.add_column("Help", overflow="fold")
        for field in signal.spec.visible_fields:
            table.add_row(
                ", ".join(field.get_flags()) or field.name,
                str(field.kind),
                str(field.value_type),
                "" if field.default is None else repr(field.default),
                field.env_var or "",
                field.help,
            )
    elif node is not None:
        table.add_column("Command", style=f"bold {OneColors.CYAN}")
        table.add_column("Help", overflow="fold")
        for child in node.visible_children:
            table.add_row(child.name, child.help)
    console.print(table)


def show_values(outcome: DispatchResult) -> None:
    """Print the resolved values of a leaf that has no handler."""
    if outcome.handled:
        return
    table = Table(title=outcome.path or outcome.node.name, box=box.SIMPLE)
    table.add_column("Field", style=f"bold {OneColors.CYAN}")
    table.add_column("Value")
    table.add_column("Source", style="dim")
    for name, value in outcome.args.items():
        source = outcome.args.source_of(name)
        table.add_row(name, repr(value), str(source) if source else "")
    console.print(table)


def main(argv: Sequence[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv or argv[0] in ("-h", "--help"):
        console.print(
            f"usage: {escape(get_program_invocation())} "
            "<config.yaml|config.toml> [tokens...]",
            highlight=False,
        )
        return EXIT_OK if argv else EXIT_PARSE_ERROR

    setup_logging()
    config_path = Path(argv[0])
    bootstrap(config_path)
    try:
        root = loader(config_path)
    except ConfigError as error:
        console.print(
            f"[{OneColors.DARK_RED_b}]ConfigError:[/] {escape(str(error))}",
            highlight=False,
            soft_wrap=True,
        )
        return EXIT_CONSTRUCTION_ERROR

    return run_cli(
        root,
        argv[1:],
        help_renderer=show_commands,
        result_renderer=show_values,
    )


if __name__ == "__main__":
    sys.exit(main())
