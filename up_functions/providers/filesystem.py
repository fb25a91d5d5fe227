"""
up_functions.providers.filesystem

Purpose:
    Read-only filesystem access and path manipulation for templates.

Notes:
    - Paths use the host OS separator and os.path semantics.
    - Directory listing matches entry names with shell globs (fnmatch), never regex,
      and is case-sensitive on every platform.
    - `ext` follows os.path.splitext: a leading dot marks a hidden file, not an
      extension, so ext(".bashrc") is "" rather than "bashrc".
"""

from __future__ import annotations

import fnmatch
import os

from up_functions.contracts.enums import TypeTag
from up_functions.contracts.protocol import OperationResult
from up_functions.contracts.values import Params, to_text
from up_functions.dispatch import OperationTable
from up_functions.errors import IOFailure
from up_functions.params import get_list, get_string, require_string
from up_functions.utils.logging import get_logger

logger = get_logger(__name__)

_SEPARATORS = os.sep + (os.altsep or "")


def read(params: Params, context: Params) -> OperationResult:
    path = require_string(params, "path")
    try:
        # newline="" keeps line endings byte-for-byte; undecodable bytes become U+FFFD.
        with open(path, encoding="utf-8", errors="replace", newline="") as fh:
            data = fh.read()
    except OSError as e:
        raise IOFailure(f"failed to read file: {e}") from e
    return OperationResult(value=data, type=TypeTag.STRING)


def exists(params: Params, context: Params) -> OperationResult:
    path = require_string(params, "path")
    return OperationResult(value=os.path.exists(path), type=TypeTag.BOOL)


def list_dir(params: Params, context: Params) -> OperationResult:
    directory = get_string(params, "dir", ".")
    pattern = get_string(params, "pattern", "*")

    try:
        names = sorted(os.listdir(directory))
    except OSError as e:
        raise IOFailure(f"failed to read directory: {e}") from e

    matched = [n for n in names if fnmatch.fnmatchcase(n, pattern)]
    logger.debug("list dir=%s pattern=%s matched=%d/%d", directory, pattern, len(matched), len(names))
    return OperationResult(value=matched, type=TypeTag.LIST)


def basename(params: Params, context: Params) -> OperationResult:
    path = require_string(params, "path")
    # "a/b/" names "b", and a path made only of separators names the root.
    stripped = path.rstrip(_SEPARATORS)
    if not stripped:
        return OperationResult(value=os.sep, type=TypeTag.STRING)
    return OperationResult(value=os.path.basename(stripped), type=TypeTag.STRING)


def dirname(params: Params, context: Params) -> OperationResult:
    path = require_string(params, "path")
    parent = os.path.dirname(path)
    return OperationResult(value=os.path.normpath(parent) if parent else ".", type=TypeTag.STRING)


def ext(params: Params, context: Params) -> OperationResult:
    path = require_string(params, "path")
    suffix = os.path.splitext(path)[1]
    return OperationResult(value=suffix[1:] if suffix.startswith(".") else suffix, type=TypeTag.STRING)


def join(params: Params, context: Params) -> OperationResult:
    parts = get_list(params, "parts", non_empty=True)
    segments = [to_text(p) for p in parts]
    segments = [s for s in segments if s]
    if not segments:
        return OperationResult(value="", type=TypeTag.STRING)
    return OperationResult(value=os.path.normpath(os.path.join(*segments)), type=TypeTag.STRING)


OPERATIONS: OperationTable = {
    "read": read,
    "exists": exists,
    "list": list_dir,
    "basename": basename,
    "dirname": dirname,
    "ext": ext,
    "join": join,
}
