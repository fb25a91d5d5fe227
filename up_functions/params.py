"""
up_functions.params

Purpose:
    Typed accessors over a request's "params" (or "context") mapping.

Contract:
    Scalar accessors return the value only when it has the requested JSON shape.
    A missing key and a key holding the wrong shape are indistinguishable: both
    yield the caller's default, with no diagnostic. Callers passing "10" where a
    number is expected get the default, exactly as if they had passed nothing.

    Sequence access is strict instead: an operation that needs a list cannot
    proceed with a fabricated one, so get_list raises MissingParameter.
"""

from __future__ import annotations

import math
from typing import Any, List, Mapping, TypeVar

from up_functions.contracts.values import DynamicValue, is_number
from up_functions.errors import MissingParameter

T = TypeVar("T")

_MISSING = object()


def get_string(params: Mapping[str, Any], key: str, default: T = "") -> str | T:
    v = params.get(key, _MISSING)
    if isinstance(v, str):
        return v
    return default


def get_int(params: Mapping[str, Any], key: str, default: T = 0) -> int | T:
    """Integral or fractional JSON numbers, truncated toward zero."""
    v = params.get(key, _MISSING)
    if not is_number(v):
        return default
    if isinstance(v, float):
        if not math.isfinite(v):
            return default
        return int(v)
    return v


def get_float(params: Mapping[str, Any], key: str, default: T = 0.0) -> float | T:
    v = params.get(key, _MISSING)
    if not is_number(v):
        return default
    return float(v)


def get_bool(params: Mapping[str, Any], key: str, default: T = False) -> bool | T:
    v = params.get(key, _MISSING)
    if isinstance(v, bool):
        return v
    return default


def get_list(params: Mapping[str, Any], key: str, *, non_empty: bool = False) -> List[DynamicValue]:
    v = params.get(key, _MISSING)
    if non_empty:
        if not isinstance(v, list) or not v:
            raise MissingParameter(f"{key} parameter required and must be non-empty list")
        return v
    if not isinstance(v, list):
        raise MissingParameter(f"{key} parameter required and must be a list")
    return v


def require_string(params: Mapping[str, Any], key: str) -> str:
    """
    Non-empty string or MissingParameter.
    An empty string counts as absent, like every other non-string shape.
    """
    s = get_string(params, key, "")
    if not s:
        raise MissingParameter(f"{key} parameter required")
    return s


def require_value(params: Mapping[str, Any], key: str) -> DynamicValue:
    """Presence check only; any value (including null) is accepted."""
    if key not in params:
        raise MissingParameter(f"{key} parameter required")
    return params[key]


def as_float(value: Any, default: float = 0.0) -> float:
    """Numeric view of a single element (used for list arithmetic)."""
    if is_number(value):
        return float(value)
    return default
