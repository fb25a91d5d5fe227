"""
up_functions.providers.lists

Purpose:
    Sequence helpers, plus `generate`, which stamps out copies of a template value.

generate:
    Each copy gets a `$self` block describing its position:
        number (1-based), index (0-based), count, first, last
    Strings inside the template may reference it as `$self.index`, and may reference
    the request context as `$<key>.<path>`. A string that is exactly one reference is
    replaced by the referenced value itself (keeping its type); references embedded in
    longer strings are replaced by their text rendering. Path segments after a
    scalar stay literal ("$self.index.json" -> "0.json"); unresolved references
    are left as written.
"""

from __future__ import annotations

import copy
import re
from typing import Any, Mapping, Tuple

from up_functions.config.default_config import DEFAULT_CONFIG
from up_functions.contracts.enums import TypeTag
from up_functions.contracts.protocol import OperationResult
from up_functions.contracts.values import DynamicValue, Params, infer_tag, to_text
from up_functions.dispatch import OperationTable
from up_functions.errors import InvalidParameter, MissingParameter
from up_functions.params import get_int, get_list, get_string, require_value

_REFERENCE = re.compile(r"\$([A-Za-z_]\w*)((?:\.\w+)*)")
_UNRESOLVED = object()


def clamp_bounds(start: int, end: int, length: int) -> Tuple[int, int]:
    """start<0 -> 0, end>len -> len, end<0 -> 0, start>end -> start=end"""
    start = max(start, 0)
    end = max(min(end, length), 0)
    if start > end:
        start = end
    return start, end


def _resolve(scopes: Mapping[str, Any], root: str, path: str) -> Tuple[Any, str]:
    """
    Walk `path` from scopes[root]. Returns (value, literal tail).

    Descent stops at the first scalar, so "$self.index.json" resolves `index` and
    keeps ".json" as text. A missing key inside a container leaves the whole
    reference unresolved.
    """
    if root not in scopes:
        return _UNRESOLVED, ""
    cur = scopes[root]
    segments = path.split(".")[1:]
    for n, seg in enumerate(segments):
        if isinstance(cur, dict):
            if seg not in cur:
                return _UNRESOLVED, ""
            cur = cur[seg]
        elif isinstance(cur, list):
            if not seg.isdigit() or int(seg) >= len(cur):
                return _UNRESOLVED, ""
            cur = cur[int(seg)]
        else:
            return cur, "".join("." + s for s in segments[n:])
    return cur, ""


def _substitute(node: DynamicValue, scopes: Mapping[str, Any]) -> DynamicValue:
    if isinstance(node, str):
        whole = _REFERENCE.fullmatch(node)
        if whole:
            found, tail = _resolve(scopes, whole.group(1), whole.group(2))
            if found is _UNRESOLVED:
                return node
            return to_text(found) + tail if tail else copy.deepcopy(found)

        def _text(m: re.Match) -> str:
            found, tail = _resolve(scopes, m.group(1), m.group(2))
            return m.group(0) if found is _UNRESOLVED else to_text(found) + tail

        return _REFERENCE.sub(_text, node)
    if isinstance(node, list):
        return [_substitute(x, scopes) for x in node]
    if isinstance(node, dict):
        return {k: _substitute(v, scopes) for k, v in node.items()}
    return node


def generate(params: Params, context: Params) -> OperationResult:
    count = get_int(params, "count", 0)
    if count <= 0:
        raise MissingParameter("count parameter required and must be positive")
    template = require_value(params, "template")

    items = []
    for i in range(count):
        self_block = {
            "number": i + 1,
            "index": i,
            "count": count,
            "first": i == 0,
            "last": i == count - 1,
        }
        items.append(_substitute(template, {**context, "self": self_block}))

    return OperationResult(value=items, type=TypeTag.LIST)


def join(params: Params, context: Params) -> OperationResult:
    items = get_list(params, "items")
    separator = get_string(params, "separator", DEFAULT_CONFIG["list"]["separator"])
    return OperationResult(value=separator.join(to_text(x) for x in items), type=TypeTag.STRING)


def slice_items(params: Params, context: Params) -> OperationResult:
    items = get_list(params, "items")
    start, end = clamp_bounds(get_int(params, "start", 0), get_int(params, "end", len(items)), len(items))
    return OperationResult(value=items[start:end], type=TypeTag.LIST)


def length(params: Params, context: Params) -> OperationResult:
    items = get_list(params, "items")
    return OperationResult(value=len(items), type=TypeTag.INT)


def contains(params: Params, context: Params) -> OperationResult:
    items = get_list(params, "items")
    needle = to_text(require_value(params, "value"))
    return OperationResult(value=any(to_text(x) == needle for x in items), type=TypeTag.BOOL)


def index(params: Params, context: Params) -> OperationResult:
    items = get_list(params, "items")
    i = get_int(params, "index", 0)
    if i < 0 or i >= len(items):
        raise InvalidParameter("index out of range")
    item = items[i]
    return OperationResult(value=item, type=infer_tag(item))


OPERATIONS: OperationTable = {
    "generate": generate,
    "join": join,
    "slice": slice_items,
    "length": length,
    "contains": contains,
    "index": index,
}
