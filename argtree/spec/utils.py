# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion utilities for Argtree argument resolution.

Token text is converted into one of the four scalar `ValueType`s. Numeric
parsing is strict: Python's own `int()`/`float()` accept surrounding
whitespace and digit-group underscores, which are not valid on a command line
and are rejected here.

Functions:
- coerce_bool: Convert explicit token text to a boolean.
- coerce_int: Strictly parse a base-10 integer, optionally bounded.
- coerce_float: Strictly parse a floating point number.
- coerce_value: Dispatch to the coercion for a `ValueType`.
- coerce_default: Normalize a declared default (native value or text).
"""
import re
from typing import Any

from argtree.spec.value_type import ValueType

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_TRUE_VALUES = frozenset({"true", "1"})


def coerce_bool(value: str | bool) -> bool:
    """
    Convert an explicit value to a boolean.

    Only the exact strings `"true"` and `"1"` are truthy; every other string,
    including `"TRUE"` or `" 1"`, is False.

    Args:
        value (str | bool): The input string or boolean.

    Returns:
        bool: Parsed boolean result.
    """
    if isinstance(value, bool):
        return value
    return value in _TRUE_VALUES


def coerce_int(value: str, int_range: tuple[int, int] | None = None) -> int:
    """
    Parse `value` as a base-10 integer, raising ValueError on anything else.

    When `int_range` is given, the result must lie within its inclusive bounds.
    """
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not a valid integer")
    return check_int_range(int(value), int_range)


def check_int_range(value: int, int_range: tuple[int, int] | None) -> int:
    if int_range is None:
        return value
    low, high = int_range
    if not low <= value <= high:
        raise ValueError(f"{value} is out of range [{low}, {high}]")
    return value


def coerce_float(value: str) -> float:
    """Parse `value` as a float, raising ValueError on anything else."""
    if not value or value != value.strip() or "_" in value:
        raise ValueError(f"'{value}' is not a valid number")
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid number") from None


def coerce_value(
    value: str, value_type: ValueType, int_range: tuple[int, int] | None = None
) -> Any:
    """
    Convert token text to the given value type.

    Args:
        value (str): The raw token text.
        value_type (ValueType): The target type.
        int_range (tuple[int, int] | None): Inclusive bounds for INT values.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If the text is not valid for the type.
    """
    if value_type is ValueType.BOOL:
        return coerce_bool(value)
    if value_type is ValueType.INT:
        return coerce_int(value, int_range)
    if value_type is ValueType.FLOAT:
        return coerce_float(value)
    return value


def coerce_default(
    value: Any, value_type: ValueType, int_range: tuple[int, int] | None = None
) -> Any:
    """
    Normalize a declared default to the field's value type.

    Native Python values of the right type pass through (an `int` is widened
    for FLOAT fields); strings are parsed with `coerce_value`.

    Raises:
        ValueError: If the default does not fit the value type.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return coerce_value(value, value_type, int_range)
    if value_type is ValueType.BOOL and isinstance(value, bool):
        return value
    if value_type is ValueType.INT and isinstance(value, int) and not isinstance(
        value, bool
    ):
        return check_int_range(value, int_range)
    if value_type is ValueType.FLOAT and isinstance(value, (int, float)) and not (
        isinstance(value, bool)
    ):
        return float(value)
    raise ValueError(
        f"default {value!r} of type {type(value).__name__} does not match {value_type}"
    )
