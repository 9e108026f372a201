"""
Helpers for reading typed properties off parsed JSON nodes.

A node is whatever ``json.load`` produced: dict, list, str, int, Decimal
(or float), bool or None. A property that is missing, or explicitly null,
reads as None; a property holding a value of the wrong shape raises
SchemaFormatError.
"""

from __future__ import annotations

import copy
from decimal import Decimal, InvalidOperation
from typing import Any

from ..errors import SchemaFormatError


def is_object(node: Any) -> bool:
    return isinstance(node, dict)


def is_array(node: Any) -> bool:
    return isinstance(node, list)


def get_property(node: Any, name: str) -> Any:
    """Return the raw value of a property, or None if the node has no such field."""
    if not is_object(node):
        return None
    return node.get(name)


def as_text(name: str, value: Any) -> str:
    """Convert a scalar value to its JSON text form."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    raise SchemaFormatError(name, value, "a scalar value")


def string_property(node: Any, name: str) -> str | None:
    value = get_property(node, name)
    if value is None:
        return None
    return as_text(name, value)


def decimal_property(node: Any, name: str) -> Decimal | None:
    value = get_property(node, name)
    if value is None:
        return None
    return parse_decimal(name, value)


def int_property(node: Any, name: str) -> int | None:
    value = get_property(node, name)
    if value is None:
        return None
    return parse_int(name, value)


def boolean_property(node: Any, name: str) -> bool | None:
    value = get_property(node, name)
    if value is None:
        return None
    return parse_boolean(name, value)


def parse_decimal(name: str, value: Any) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
        raise SchemaFormatError(name, value, "a decimal number")
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation as e:
        raise SchemaFormatError(name, value, "a decimal number") from e
    if not result.is_finite():
        raise SchemaFormatError(name, value, "a finite decimal number")
    return result


def parse_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise SchemaFormatError(name, value, "an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        # 5.0 is accepted, 5.5 is not
        if not Decimal(value).is_finite() or value != int(value):
            raise SchemaFormatError(name, value, "an integer")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as e:
            raise SchemaFormatError(name, value, "an integer") from e
    raise SchemaFormatError(name, value, "an integer")


def parse_boolean(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise SchemaFormatError(name, value, "a boolean")


def read_object(node: Any) -> Any:
    """Read a generic JSON value, keeping its shape (object, array or scalar)."""
    return copy.deepcopy(node)


def read_string_array(node: Any, name: str = "required") -> list[str] | None:
    """Read an array of text values. Null entries are skipped."""
    if not is_array(node):
        return None
    return [as_text(name, item) for item in node if item is not None]


def read_object_array(node: Any) -> list[Any] | None:
    if not is_array(node):
        return None
    return [read_object(item) for item in node]
