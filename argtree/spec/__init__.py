"""
Argtree CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Field schema and resolution engine for Argtree.

Provides the building blocks for declaring what a command accepts and for
resolving a token list plus the environment into typed values:

- `FieldSpec`, `FieldKind`, `ValueType`: the description of one field.
- `flag`, `option`, `required`, `positional`: builder functions for fields.
- `ArgumentSpec`: the validated, ordered set of fields for one command.
- `resolve`: the resolution engine.
- `ParsedArguments`: the immutable result of a resolution.
"""
from .argument_spec import ArgumentSpec
from .field import FieldBuilder, FieldSpec, flag, option, positional, required
from .field_kind import FieldKind
from .parsed_arguments import ParsedArguments
from .parser_types import ProvidedSet, ValueSource
from .resolver import HELP_MARKERS, resolve
from .value_type import ValueType

__all__ = [
    "ArgumentSpec",
    "FieldBuilder",
    "FieldKind",
    "FieldSpec",
    "HELP_MARKERS",
    "ParsedArguments",
    "ProvidedSet",
    "ValueSource",
    "ValueType",
    "flag",
    "option",
    "positional",
    "required",
    "resolve",
]
