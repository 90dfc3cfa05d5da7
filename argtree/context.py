# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Per-invocation context for Argtree handlers.

`InvocationContext` is created by the dispatcher for every handler call and
discarded afterwards. It carries the command path and resolved arguments,
a scratch `extra` dict the handler may use freely, timing information and,
once the handler returns, its result or exception.

Handlers receive it as their second argument:

    def serve(args: ParsedArguments, context: InvocationContext) -> int:
        context.extra["started_by"] = "cli"
        ...
"""
from __future__ import annotations

import time
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from rich.console import Console

from argtree.console import console
from argtree.spec.parsed_arguments import ParsedArguments


class InvocationContext(BaseModel):
    """
    Runtime state for a single handler invocation.

    Attributes:
        path (str): Space-joined command names that selected the leaf.
        args (ParsedArguments): The resolved arguments passed to the handler.
        tokens (tuple[str, ...]): The tokens that were resolved against the leaf.
        result (Any | None): The handler's return value, if it succeeded.
        exception (Exception | None): The exception raised, if it failed.
        start_time (float | None): High-resolution performance start time.
        end_time (float | None): High-resolution performance end time.
        start_wall (datetime | None): Wall-clock timestamp when the call began.
        end_wall (datetime | None): Wall-clock timestamp when the call ended.
        extra (dict): Scratch space owned by the handler for this call.
        console (Console): Rich console instance for output.

    Properties:
        duration (float | None): The call duration in seconds.
        success (bool): Whether the handler completed without raising.
        status (str): "OK" if successful, otherwise "ERROR".
    """

    path: str
    args: ParsedArguments
    tokens: tuple[str, ...] = ()
    result: Any | None = None
    exception: Exception | None = None

    start_time: float | None = None
    end_time: float | None = None
    start_wall: datetime | None = None
    end_wall: datetime | None = None

    extra: dict[str, Any] = Field(default_factory=dict)
    console: Console = console

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def start_timer(self) -> None:
        self.start_wall = datetime.now()
        self.start_time = time.perf_counter()

    def stop_timer(self) -> None:
        self.end_time = time.perf_counter()
        self.end_wall = datetime.now()

    @property
    def duration(self) -> float | None:
        if self.start_time is None:
            return None
        if self.end_time is None:
            return time.perf_counter() - self.start_time
        return self.end_time - self.start_time

    @property
    def success(self) -> bool:
        return self.exception is None

    @property
    def status(self) -> str:
        return "OK" if self.success else "ERROR"

    def as_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "args": self.args.as_dict(),
            "result": self.result,
            "exception": repr(self.exception) if self.exception else None,
            "duration": self.duration,
            "extra": self.extra,
        }

    def to_log_line(self) -> str:
        """Structured flat-line format for logging and metrics."""
        duration_str = f"{self.duration:.3f}s" if self.duration is not None else "n/a"
        exception_str = (
            f"{type(self.exception).__name__}: {self.exception}"
            if self.exception
            else "None"
        )
        return (
            f"[{self.path or '<root>'}] status={self.status} duration={duration_str} "
            f"result={self.result!r} exception={exception_str}"
        )

    def __str__(self) -> str:
        duration_str = f"{self.duration:.3f}s" if self.duration is not None else "n/a"
        result_str = (
            f"Result: {self.result!r}" if self.success else f"Exception: {self.exception}"
        )
        return (
            f"<InvocationContext '{self.path}' | {self.status} | "
            f"Duration: {duration_str} | {result_str}>"
        )
