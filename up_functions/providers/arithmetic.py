"""
up_functions.providers.arithmetic

Purpose:
    Floating-point arithmetic for templates. Everything is tagged float except `mod`,
    which works on truncated integers.

Notes:
    - Non-finite results (overflow, pow domain errors) are reported as invalid
      parameters instead of leaking inf/nan into the response.
    - `round` rounds half away from zero; `mod` keeps the sign of the dividend.
"""

from __future__ import annotations

import math
from typing import Callable

from up_functions.contracts.enums import TypeTag
from up_functions.contracts.protocol import OperationResult
from up_functions.contracts.values import Params
from up_functions.dispatch import OperationTable
from up_functions.errors import InvalidParameter
from up_functions.params import as_float, get_float, get_int, get_list


def _float_result(x: float) -> OperationResult:
    if not math.isfinite(x):
        raise InvalidParameter("result is not a finite number")
    return OperationResult(value=x, type=TypeTag.FLOAT)


def _binary(fn: Callable[[float, float], float]) -> Callable[[Params, Params], OperationResult]:
    def op(params: Params, context: Params) -> OperationResult:
        return _float_result(fn(get_float(params, "a", 0.0), get_float(params, "b", 0.0)))

    op.__name__ = fn.__name__
    return op


def _unary(fn: Callable[[float], float]) -> Callable[[Params, Params], OperationResult]:
    def op(params: Params, context: Params) -> OperationResult:
        return _float_result(float(fn(get_float(params, "x", 0.0))))

    op.__name__ = fn.__name__
    return op


def add(a: float, b: float) -> float:
    return a + b


def sub(a: float, b: float) -> float:
    return a - b


def mul(a: float, b: float) -> float:
    return a * b


def div(params: Params, context: Params) -> OperationResult:
    a = get_float(params, "a", 0.0)
    b = get_float(params, "b", 0.0)
    if b == 0:
        raise InvalidParameter("division by zero")
    return _float_result(a / b)


def mod(params: Params, context: Params) -> OperationResult:
    a = get_int(params, "a", 0)
    b = get_int(params, "b", 0)
    if b == 0:
        raise InvalidParameter("modulo by zero")
    r = abs(a) % abs(b)
    return OperationResult(value=-r if a < 0 else r, type=TypeTag.INT)


def power(params: Params, context: Params) -> OperationResult:
    base = get_float(params, "base", 0.0)
    exponent = get_float(params, "exponent", 0.0)
    try:
        return _float_result(math.pow(base, exponent))
    except (OverflowError, ValueError) as e:
        raise InvalidParameter(f"pow({base}, {exponent}): {e}") from e


def sqrt(params: Params, context: Params) -> OperationResult:
    x = get_float(params, "x", 0.0)
    if x < 0:
        raise InvalidParameter("cannot take square root of negative number")
    return _float_result(math.sqrt(x))


def round_half_away(x: float) -> float:
    t = math.trunc(x)
    if abs(x - t) >= 0.5:
        t += math.copysign(1, x)
    return float(t)


def _extreme(pick: Callable[..., float]) -> Callable[[Params, Params], OperationResult]:
    def op(params: Params, context: Params) -> OperationResult:
        values = get_list(params, "values", non_empty=True)
        return _float_result(pick(as_float(v) for v in values))

    op.__name__ = pick.__name__
    return op


OPERATIONS: OperationTable = {
    "add": _binary(add),
    "sub": _binary(sub),
    "mul": _binary(mul),
    "div": div,
    "mod": mod,
    "pow": power,
    "sqrt": sqrt,
    "abs": _unary(abs),
    "min": _extreme(min),
    "max": _extreme(max),
    "ceil": _unary(math.ceil),
    "floor": _unary(math.floor),
    "round": _unary(round_half_away),
}
