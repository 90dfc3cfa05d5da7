"""
Argtree CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .command import CommandNode, category, leaf
from .context import InvocationContext
from .dispatcher import DispatchResult, Dispatcher, run_cli
from .exceptions import (
    ArgtreeError,
    CommandTreeError,
    ConfigError,
    InvalidValueError,
    MaxDepthExceededError,
    MissingRequiredArgumentError,
    MissingValueError,
    ParseError,
    SpecDefinitionError,
    TooManyPositionalArgsError,
    UnknownCommandError,
    UnknownFlagError,
)
from .logger import logger
from .signals import FlowSignal, HelpRequested
from .spec import (
    ArgumentSpec,
    FieldKind,
    FieldSpec,
    ParsedArguments,
    ValueType,
    flag,
    option,
    positional,
    required,
    resolve,
)
from .version import __version__

__all__ = [
    "ArgtreeError",
    "ArgumentSpec",
    "CommandNode",
    "CommandTreeError",
    "ConfigError",
    "DispatchResult",
    "Dispatcher",
    "FieldKind",
    "FieldSpec",
    "FlowSignal",
    "HelpRequested",
    "InvalidValueError",
    "InvocationContext",
    "MaxDepthExceededError",
    "MissingRequiredArgumentError",
    "MissingValueError",
    "ParseError",
    "ParsedArguments",
    "SpecDefinitionError",
    "TooManyPositionalArgsError",
    "UnknownCommandError",
    "UnknownFlagError",
    "ValueType",
    "__version__",
    "category",
    "flag",
    "leaf",
    "logger",
    "option",
    "positional",
    "required",
    "resolve",
    "run_cli",
]
