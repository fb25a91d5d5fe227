"""
up_functions.providers.randomness

Purpose:
    Random values drawn from the OS CSPRNG (`secrets`).
    Output varies per call; the contract (tag, range, declared errors) does not.
"""

from __future__ import annotations

import math
import secrets

from up_functions.config.default_config import DEFAULT_CONFIG
from up_functions.contracts.enums import TypeTag
from up_functions.contracts.protocol import OperationResult
from up_functions.contracts.values import Params, infer_tag
from up_functions.dispatch import OperationTable
from up_functions.errors import InvalidParameter
from up_functions.params import get_float, get_int, get_list

_CFG = DEFAULT_CONFIG["random"]

_FLOAT_BITS = 53


def random_int(params: Params, context: Params) -> OperationResult:
    """Uniform integer in [min, max)."""
    lo = get_int(params, "min", _CFG["int_min"])
    hi = get_int(params, "max", _CFG["int_max"])
    if lo >= hi:
        raise InvalidParameter("min must be less than max")
    return OperationResult(value=lo + secrets.randbelow(hi - lo), type=TypeTag.INT)


def random_float(params: Params, context: Params) -> OperationResult:
    """Uniform float in [min, max)."""
    lo = get_float(params, "min", _CFG["float_min"])
    hi = get_float(params, "max", _CFG["float_max"])
    if lo >= hi:
        raise InvalidParameter("min must be less than max")

    span = hi - lo
    if not math.isfinite(span):
        raise InvalidParameter("range between min and max is too large")

    x = lo + (secrets.randbits(_FLOAT_BITS) / (1 << _FLOAT_BITS)) * span
    if x >= hi:
        # Rounding can land exactly on max for wide ranges.
        x = math.nextafter(hi, lo)
    return OperationResult(value=x, type=TypeTag.FLOAT)


def random_bool(params: Params, context: Params) -> OperationResult:
    return OperationResult(value=secrets.randbits(1) == 1, type=TypeTag.BOOL)


def choice(params: Params, context: Params) -> OperationResult:
    items = get_list(params, "items", non_empty=True)
    item = secrets.choice(items)
    return OperationResult(value=item, type=infer_tag(item))


def random_bytes(params: Params, context: Params) -> OperationResult:
    """Hex-encoded random bytes."""
    size = get_int(params, "size", _CFG["bytes_size"])
    max_size = _CFG["max_bytes_size"]
    if size <= 0 or size > max_size:
        raise InvalidParameter(f"size must be between 1 and {max_size}")
    return OperationResult(value=secrets.token_hex(size), type=TypeTag.STRING)


OPERATIONS: OperationTable = {
    "int": random_int,
    "float": random_float,
    "bool": random_bool,
    "choice": choice,
    "bytes": random_bytes,
}
