"""
up_functions.contracts.values

Purpose:
    Value model for everything that crosses the provider boundary.

    A DynamicValue is the closed union produced by a generic JSON decode:
        null | bool | number | string | sequence | mapping

    Integral and fractional numbers are both NUMBER here; deciding the intended
    width is the job of the coercion layer (up_functions.params).

Notes:
    bool is a subclass of int in Python, so every classifier in this module checks
    for bool before checking for numbers.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from pydantic import JsonValue

from up_functions.contracts.enums import TypeTag, ValueKind

DynamicValue = JsonValue
Params = Dict[str, DynamicValue]

_TAG_BY_KIND = {
    ValueKind.NULL: TypeTag.STRING,
    ValueKind.BOOL: TypeTag.BOOL,
    ValueKind.STRING: TypeTag.STRING,
    ValueKind.SEQUENCE: TypeTag.LIST,
    ValueKind.MAPPING: TypeTag.BLOCK,
}

# Floats at or above this magnitude render in exponent form.
_EXPONENT_THRESHOLD = 1e21


def kind_of(value: Any) -> ValueKind:
    """
    Classify a value into one of the six DynamicValue cases.
    Raises TypeError for anything a JSON decode could not have produced.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.SEQUENCE
    if isinstance(value, dict):
        return ValueKind.MAPPING
    raise TypeError(f"not a dynamic value: {type(value).__name__}")


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def infer_tag(value: Any) -> TypeTag:
    """
    Pick the type tag matching a value's shape.
    Used by operations that return an arbitrary caller-supplied item.
    """
    kind = kind_of(value)
    if kind is ValueKind.NUMBER:
        return TypeTag.INT if isinstance(value, int) else TypeTag.FLOAT
    return _TAG_BY_KIND[kind]


def _number_text(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return str(int(value))
    return repr(value)


def to_text(value: Any) -> str:
    """
    Render a value as template text.

    Strings render verbatim, numbers without a spurious ".0", booleans and null
    as their JSON literals, sequences and mappings as compact JSON.
    """
    kind = kind_of(value)
    if kind is ValueKind.STRING:
        return value
    if kind is ValueKind.NUMBER:
        return _number_text(value)
    if kind is ValueKind.BOOL:
        return "true" if value else "false"
    if kind is ValueKind.NULL:
        return "null"
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
