"""
up_functions.providers.strings

Purpose:
    String manipulation for templates. Every operation except `join` requires a
    non-empty `s`.

Notes:
    Indices and lengths count code points, not bytes.
"""

from __future__ import annotations

from up_functions.config.default_config import DEFAULT_CONFIG
from up_functions.contracts.enums import TypeTag
from up_functions.contracts.protocol import OperationResult
from up_functions.contracts.values import Params, to_text
from up_functions.dispatch import OperationTable
from up_functions.errors import InvalidParameter
from up_functions.params import get_int, get_list, get_string, require_string
from up_functions.providers.lists import clamp_bounds

_CFG = DEFAULT_CONFIG["string"]


def _string(value: str) -> OperationResult:
    return OperationResult(value=value, type=TypeTag.STRING)


def _bool(value: bool) -> OperationResult:
    return OperationResult(value=value, type=TypeTag.BOOL)


def _is_word_separator(c: str) -> bool:
    if c.isascii():
        return not (c.isalnum() or c == "_")
    if c.isalpha() or c.isdigit():
        return False
    return c.isspace()


def title_case(s: str) -> str:
    """Upper-case the first letter of every word; leave the rest untouched."""
    out = []
    prev = " "
    for c in s:
        out.append(c.upper() if _is_word_separator(prev) else c)
        prev = c
    return "".join(out)


def upper(params: Params, context: Params) -> OperationResult:
    return _string(require_string(params, "s").upper())


def lower(params: Params, context: Params) -> OperationResult:
    return _string(require_string(params, "s").lower())


def title(params: Params, context: Params) -> OperationResult:
    return _string(title_case(require_string(params, "s")))


def trim(params: Params, context: Params) -> OperationResult:
    s = require_string(params, "s")
    cutset = get_string(params, "cutset", _CFG["trim_cutset"])
    return _string(s.strip(cutset) if cutset else s)


def trim_prefix(params: Params, context: Params) -> OperationResult:
    s = require_string(params, "s")
    prefix = require_string(params, "prefix")
    return _string(s.removeprefix(prefix))


def trim_suffix(params: Params, context: Params) -> OperationResult:
    s = require_string(params, "s")
    suffix = require_string(params, "suffix")
    return _string(s.removesuffix(suffix))


def split(params: Params, context: Params) -> OperationResult:
    s = require_string(params, "s")
    sep = get_string(params, "sep", _CFG["separator"])
    parts = s.split(sep) if sep else list(s)
    return OperationResult(value=parts, type=TypeTag.LIST)


def join(params: Params, context: Params) -> OperationResult:
    items = get_list(params, "items")
    sep = get_string(params, "sep", _CFG["separator"])
    return _string(sep.join(to_text(x) for x in items))


def replace(params: Params, context: Params) -> OperationResult:
    s = require_string(params, "s")
    old = require_string(params, "old")
    new = get_string(params, "new", "")
    n = get_int(params, "n", 1)
    # n < 0 replaces every occurrence.
    return _string(s.replace(old, new, n if n >= 0 else -1))


def replace_all(params: Params, context: Params) -> OperationResult:
    s = require_string(params, "s")
    old = require_string(params, "old")
    new = get_string(params, "new", "")
    return _string(s.replace(old, new))


def contains(params: Params, context: Params) -> OperationResult:
    s = require_string(params, "s")
    substr = require_string(params, "substr")
    return _bool(substr in s)


def has_prefix(params: Params, context: Params) -> OperationResult:
    s = require_string(params, "s")
    prefix = require_string(params, "prefix")
    return _bool(s.startswith(prefix))


def has_suffix(params: Params, context: Params) -> OperationResult:
    s = require_string(params, "s")
    suffix = require_string(params, "suffix")
    return _bool(s.endswith(suffix))


def slice_string(params: Params, context: Params) -> OperationResult:
    s = require_string(params, "s")
    start, end = clamp_bounds(get_int(params, "start", 0), get_int(params, "end", len(s)), len(s))
    return _string(s[start:end])


def repeat(params: Params, context: Params) -> OperationResult:
    s = require_string(params, "s")
    count = get_int(params, "count", 1)
    max_count = _CFG["max_repeat_count"]
    if count < 0:
        raise InvalidParameter("count must be non-negative")
    if count > max_count:
        raise InvalidParameter(f"count too large (max {max_count})")
    return _string(s * count)


def reverse(params: Params, context: Params) -> OperationResult:
    return _string(require_string(params, "s")[::-1])


def length(params: Params, context: Params) -> OperationResult:
    return OperationResult(value=len(require_string(params, "s")), type=TypeTag.INT)


OPERATIONS: OperationTable = {
    "upper": upper,
    "lower": lower,
    "title": title,
    "trim": trim,
    "trimPrefix": trim_prefix,
    "trimSuffix": trim_suffix,
    "split": split,
    "join": join,
    "replace": replace,
    "replaceAll": replace_all,
    "contains": contains,
    "hasPrefix": has_prefix,
    "hasSuffix": has_suffix,
    "slice": slice_string,
    "repeat": repeat,
    "reverse": reverse,
    "length": length,
}
