# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Hierarchical dispatch of a token stream through a command tree.

`Dispatcher.dispatch` walks the tree one token at a time:

- At a category, an empty remainder or a leading `--help`/`-h` raises
  `HelpRequested` for that category. Otherwise the next token must exactly
  match one of its children, or `UnknownCommandError` is raised with a
  near-match suggestion and the sibling names.
- At a leaf, the remaining tokens are resolved against its `ArgumentSpec`
  and the handler, if any, is called synchronously with the resolved
  arguments and a fresh `InvocationContext`.

Handler exceptions propagate unchanged. Parse errors raised by the leaf's
resolver are annotated with the command path, and their locations are
rebased onto the full token list given to `dispatch`.

`run_cli` wraps a dispatch for use as a process entry point and maps each
outcome to an exit code.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping, Sequence

from rich.markup import escape

from argtree.command import CommandNode
from argtree.console import console
from argtree.context import InvocationContext
from argtree.diagnostics import unknown_command_error
from argtree.exceptions import ArgtreeError, CommandTreeError, Location, ParseError
from argtree.logger import logger
from argtree.signals import HelpRequested
from argtree.spec.parsed_arguments import ParsedArguments
from argtree.spec.resolver import is_help_marker, resolve
from argtree.themes import OneColors

EXIT_OK = 0
EXIT_CONSTRUCTION_ERROR = 1
EXIT_PARSE_ERROR = 2
EXIT_INTERRUPTED = 130


@dataclass(frozen=True)
class DispatchResult:
    """
    Outcome of a successful dispatch.

    Attributes:
        path (str): Space-joined command names that selected `node`.
        node (CommandNode): The leaf that was resolved.
        args (ParsedArguments): The resolved arguments.
        result (Any): The handler's return value, `None` if no handler ran.
        handled (bool): True if a handler was called.
    """

    path: str
    node: CommandNode
    args: ParsedArguments
    result: Any = None
    handled: bool = False


class Dispatcher:
    """
    Routes token lists through a command tree to a leaf and its handler.

    The root may be a category (multi-command tools) or a leaf
    (single-command tools). The root's own name is never part of the path.
    """

    def __init__(self, root: CommandNode) -> None:
        if not isinstance(root, CommandNode):
            raise CommandTreeError(
                f"Dispatcher root must be a CommandNode, got {type(root).__name__}"
            )
        self.root = root

    def dispatch(
        self,
        tokens: Sequence[str],
        environment: Mapping[str, str] | None = None,
    ) -> DispatchResult:
        """
        Dispatch `tokens` through the tree.

        Args:
            tokens (Sequence[str]): Command-line tokens, program name excluded.
            environment (Mapping[str, str] | None): Variables for env-backed
                fields. Defaults to `os.environ`.

        Returns:
            DispatchResult: The matched leaf, its arguments and handler result.

        Raises:
            HelpRequested: Help was asked for, or a category had no sub-command.
            ParseError: The tokens do not match the tree or the leaf's spec.
        """
        tokens = list(tokens)
        node = self.root
        names: list[str] = []
        index = 0
        while node.is_category:
            path = " ".join(names)
            if index >= len(tokens) or is_help_marker(tokens[index]):
                logger.debug("Help requested at category '%s'", path or node.name)
                raise HelpRequested(node, path)
            name = tokens[index]
            child = node.child(name)
            if child is None:
                raise unknown_command_error(
                    name, node.child_names, path, Location(index, 0)
                )
            logger.debug("Descending into '%s' at '%s'", name, path or node.name)
            names.append(name)
            node = child
            index += 1

        path = " ".join(names)
        remaining = tokens[index:]
        args = self._resolve_leaf(node, path, remaining, index, environment)
        if node.handler is None:
            logger.debug("Leaf '%s' has no handler; returning parsed arguments", path)
            return DispatchResult(path=path, node=node, args=args)
        result = self._call_handler(node, path, args, remaining)
        return DispatchResult(path=path, node=node, args=args, result=result, handled=True)

    def _resolve_leaf(
        self,
        node: CommandNode,
        path: str,
        tokens: list[str],
        offset: int,
        environment: Mapping[str, str] | None,
    ) -> ParsedArguments:
        assert node.spec is not None
        try:
            return resolve(node.spec, tokens, environment)
        except HelpRequested:
            raise HelpRequested(node, path) from None
        except ParseError as error:
            error.path = path
            if error.location is not None and offset:
                error.location = replace(
                    error.location, arg_index=error.location.arg_index + offset
                )
            raise

    def _call_handler(
        self,
        node: CommandNode,
        path: str,
        args: ParsedArguments,
        tokens: list[str],
    ) -> Any:
        assert node.handler is not None
        context = InvocationContext(path=path, args=args, tokens=tuple(tokens))
        context.start_timer()
        logger.info("Running '%s'", path or node.name)
        try:
            context.result = node.handler(args, context)
            return context.result
        except Exception as error:
            context.exception = error
            logger.warning(
                "Handler for '%s' raised %s: %s",
                path or node.name,
                type(error).__name__,
                error,
            )
            raise
        finally:
            context.stop_timer()
            logger.debug(context.to_log_line())


def run_cli(
    root: CommandNode | Dispatcher,
    argv: Sequence[str] | None = None,
    environment: Mapping[str, str] | None = None,
    help_renderer: Callable[[HelpRequested], Any] | None = None,
    result_renderer: Callable[[DispatchResult], Any] | None = None,
) -> int:
    """
    Dispatch `argv` through `root` and return a process exit code.

    Args:
        root (CommandNode | Dispatcher): The tree, or a dispatcher wrapping it.
        argv (Sequence[str] | None): Tokens without the program name.
            Defaults to `sys.argv[1:]`.
        environment (Mapping[str, str] | None): Defaults to `os.environ`.
        help_renderer (Callable | None): Called with the `HelpRequested`
            signal when help is requested.
        result_renderer (Callable | None): Called with the `DispatchResult`
            after a successful dispatch.

    Returns:
        int: 0 on success or help, the handler's result if it returned an
        int, 1 on a construction error, 2 on a parse error and 130 on
        interrupt.
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    try:
        dispatcher = root if isinstance(root, Dispatcher) else Dispatcher(root)
        outcome = dispatcher.dispatch(argv, environment)
    except HelpRequested as help_signal:
        if help_renderer is not None:
            help_renderer(help_signal)
        return EXIT_OK
    except ParseError as error:
        logger.debug("Parse error: %r", error)
        console.print(
            f"[{OneColors.DARK_RED_b}]error:[/] {escape(str(error))}",
            highlight=False,
            soft_wrap=True,
        )
        return EXIT_PARSE_ERROR
    except ArgtreeError as error:
        logger.error("%s: %s", type(error).__name__, error)
        console.print(
            f"[{OneColors.DARK_RED_b}]{type(error).__name__}:[/] {escape(str(error))}",
            highlight=False,
            soft_wrap=True,
        )
        return EXIT_CONSTRUCTION_ERROR
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return EXIT_INTERRUPTED

    if result_renderer is not None:
        result_renderer(outcome)
    if isinstance(outcome.result, int) and not isinstance(outcome.result, bool):
        return outcome.result
    return EXIT_OK
