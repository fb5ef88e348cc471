# Optgroups — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion helpers used when an `Option` finalizes its raw invocations.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string or raw value to an Enum instance.
- coerce_value: General-purpose coercion to a target type (unions, enums,
  literals, datetimes and any callable converter).
"""
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

TRUE_STRINGS = frozenset({"true", "t", "1", "yes", "y", "on"})
FALSE_STRINGS = frozenset({"false", "f", "0", "no", "n", "off"})


def coerce_bool(value: str | bool) -> bool:
    """
    Convert a string to a boolean.

    Unlike `bool()`, anything that is not a recognised truthy or falsy spelling
    is rejected instead of being treated as True.

    Raises:
        ValueError: If the string is not a known boolean spelling.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUE_STRINGS:
        return True
    if normalized in FALSE_STRINGS:
        return False
    raise ValueError(f"'{value}' is not a valid boolean")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Convert a raw value or string to an Enum instance, by name first, then by value.

    Raises:
        ValueError: If the value cannot be resolved to a member.
    """
    if isinstance(value, enum_type):
        return value

    if isinstance(value, str):
        try:
            return enum_type[value]
        except KeyError:
            pass

    base_type = type(next(iter(enum_type)).value)
    try:
        return enum_type(base_type(value))
    except (ValueError, TypeError):
        values = [str(member.value) for member in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(values)}}}") from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Attempt to convert a raw command line string to `target_type`.

    Handles Union, Literal, Enum, bool and datetime specially; anything else is
    called with the string, and a `TypeError` or `ArithmeticError` it raises (such as
    `decimal.InvalidOperation`) is re-raised as `ValueError`.

    Raises:
        ValueError: If conversion fails or the value is invalid.
    """
    if target_type is str or target_type is Any:
        return value

    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        if value not in args:
            raise ValueError(f"'{value}' is not one of {', '.join(map(str, args))}")
        return value

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            if arg is type(None):
                continue
            try:
                return coerce_value(value, arg)
            except (ValueError, TypeError):
                continue
        raise ValueError(f"'{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"'{value}' could not be parsed as a datetime") from error

    try:
        return target_type(value)
    except (TypeError, ArithmeticError) as error:
        raise ValueError(f"'{value}' could not be converted: {error}") from error
