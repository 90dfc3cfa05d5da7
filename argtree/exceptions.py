# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in the Argtree CLI framework.

Two families of errors exist:

- Construction errors, raised while a schema is assembled (an invalid
  `FieldSpec`, `ArgumentSpec`, `CommandNode` tree or configuration file).
  These indicate a programming or configuration mistake.
- Parse errors, raised while a token stream is resolved against an already
  valid schema. These indicate a user input mistake and carry enough
  structured context (offending token, suggestion, location) for a renderer to
  produce a helpful message without re-deriving it.

Exception Hierarchy:
- ArgtreeError
    ├── SpecDefinitionError
    ├── CommandTreeError
    │   └── MaxDepthExceededError
    ├── ConfigError
    └── ParseError
        ├── UnknownFlagError
        ├── MissingValueError
        ├── InvalidValueError
        ├── MissingRequiredArgumentError
        ├── TooManyPositionalArgsError
        └── UnknownCommandError

Help requests are not errors; see `argtree.signals.HelpRequested`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ArgtreeError(Exception):
    """Base exception for the Argtree framework."""


class SpecDefinitionError(ArgtreeError):
    """Exception raised when a FieldSpec or ArgumentSpec violates its invariants."""


class CommandTreeError(ArgtreeError):
    """Exception raised when a CommandNode tree is assembled incorrectly."""


class MaxDepthExceededError(CommandTreeError):
    """Exception raised when a command tree is nested deeper than allowed."""


class ConfigError(ArgtreeError):
    """Exception raised when a command tree configuration cannot be loaded."""


class ParseErrorKind(Enum):
    """Classifies a parse failure."""

    UNKNOWN_FLAG = "unknown_flag"
    MISSING_VALUE = "missing_value"
    INVALID_VALUE = "invalid_value"
    MISSING_REQUIRED_ARGUMENT = "missing_required_argument"
    TOO_MANY_POSITIONAL_ARGS = "too_many_positional_args"
    UNKNOWN_COMMAND = "unknown_command"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Location:
    """Position of the offending input inside the token list."""

    arg_index: int
    char_index: int = 0


class ParseError(ArgtreeError):
    """
    Base class for failures while resolving tokens against a schema.

    Attributes:
        kind (ParseErrorKind): The failure classification.
        message (str): Short human-readable description.
        token (str | None): The offending token, field or command name.
        field (str | None): Name of the field involved, if any.
        suggestion (str | None): A near-match name the user may have meant.
        alternatives (tuple[str, ...]): Other names a renderer may list.
        location (Location | None): Where in the token list the failure occurred.
        path (str): Command path at which the failure occurred ("" for the root).
    """

    kind: ParseErrorKind

    def __init__(
        self,
        message: str,
        *,
        token: str | None = None,
        field: str | None = None,
        suggestion: str | None = None,
        alternatives: tuple[str, ...] | list[str] = (),
        location: Location | None = None,
        path: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.token = token
        self.field = field
        self.suggestion = suggestion
        self.alternatives = tuple(alternatives)
        self.location = location
        self.path = path

    def __str__(self) -> str:
        text = self.message
        if self.token is not None:
            text = f"{text} ('{self.token}')"
        if self.suggestion:
            text = f"{text}. Did you mean '{self.suggestion}'?"
        return text

    def as_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "token": self.token,
            "field": self.field,
            "suggestion": self.suggestion,
            "alternatives": list(self.alternatives),
            "location": (
                {
                    "arg_index": self.location.arg_index,
                    "char_index": self.location.char_index,
                }
                if self.location
                else None
            ),
            "path": self.path,
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value!r}, token={self.token!r}, "
            f"suggestion={self.suggestion!r}, location={self.location!r})"
        )


class UnknownFlagError(ParseError):
    """Exception raised when a long or short flag is not declared by the spec."""

    kind = ParseErrorKind.UNKNOWN_FLAG


class MissingValueError(ParseError):
    """Exception raised when a value-taking flag is the last token."""

    kind = ParseErrorKind.MISSING_VALUE


class InvalidValueError(ParseError):
    """Exception raised when a value cannot be coerced to the field's type."""

    kind = ParseErrorKind.INVALID_VALUE


class MissingRequiredArgumentError(ParseError):
    """Exception raised when a required field is resolved by neither CLI nor env."""

    kind = ParseErrorKind.MISSING_REQUIRED_ARGUMENT


class TooManyPositionalArgsError(ParseError):
    """Exception raised when more bare tokens are given than positional fields."""

    kind = ParseErrorKind.TOO_MANY_POSITIONAL_ARGS


class UnknownCommandError(ParseError):
    """Exception raised when a command name does not match any sibling."""

    kind = ParseErrorKind.UNKNOWN_COMMAND
