"""
up_functions.providers.env

Purpose:
    Read-only access to the environment inherited from the host.
"""

from __future__ import annotations

import os
import re

from up_functions.contracts.enums import TypeTag
from up_functions.contracts.protocol import OperationResult
from up_functions.contracts.values import Params
from up_functions.dispatch import OperationTable
from up_functions.params import get_string, require_string

# ${NAME} or $NAME; unset variables expand to "".
_REFERENCE = re.compile(r"\$(?:\{([^}]*)\}|([A-Za-z0-9_]+))")


def get(params: Params, context: Params) -> OperationResult:
    key = require_string(params, "key")
    default = get_string(params, "default", "")

    value = os.environ.get(key, "")
    if value == "" and default != "":
        return OperationResult(value=default, type=TypeTag.STRING)
    return OperationResult(value=value, type=TypeTag.STRING)


def has(params: Params, context: Params) -> OperationResult:
    key = require_string(params, "key")
    return OperationResult(value=key in os.environ, type=TypeTag.BOOL)


def list_vars(params: Params, context: Params) -> OperationResult:
    prefix = get_string(params, "prefix", "")
    block = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
    return OperationResult(value=block, type=TypeTag.BLOCK)


def expand(params: Params, context: Params) -> OperationResult:
    text = require_string(params, "text")

    def _lookup(m: re.Match) -> str:
        name = m.group(1) if m.group(1) is not None else m.group(2)
        return os.environ.get(name, "")

    return OperationResult(value=_REFERENCE.sub(_lookup, text), type=TypeTag.STRING)


OPERATIONS: OperationTable = {
    "get": get,
    "has": has,
    "list": list_vars,
    "expand": expand,
}
