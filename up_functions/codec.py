"""
up_functions.codec

Purpose:
    Read exactly one Request from the input stream and write exactly one Response
    to the output stream.

Notes:
    - Decoding takes the first top-level JSON value and ignores anything after it.
    - NaN/Infinity literals and numbers outside the double range are rejected on the
      way in; non-finite floats are rejected on the way out (allow_nan=False).
    - Output is one compact ASCII-safe JSON object terminated by a newline, flushed.
"""

from __future__ import annotations

import json
import math
from typing import Any, NoReturn, TextIO

from pydantic import ValidationError

from up_functions.contracts.protocol import Request, Response
from up_functions.contracts.values import kind_of
from up_functions.errors import DecodeError, EncodingFailure

_PREFIX = "Invalid request"


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"invalid number literal {name}")


def _parse_float(text: str) -> float:
    v = float(text)
    if not math.isfinite(v):
        raise ValueError(f"number {text} out of range")
    return v


def _parse_int(text: str) -> int:
    v = int(text)
    try:
        float(v)
    except OverflowError:
        raise ValueError(f"number {text} out of range") from None
    return v


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


def parse_request(text: str) -> Request:
    """Decode a request from already-read text. Raises DecodeError."""
    body = text.lstrip()
    if not body:
        raise DecodeError(f"{_PREFIX}: unexpected end of input")

    decoder = json.JSONDecoder(
        parse_constant=_reject_constant,
        parse_float=_parse_float,
        parse_int=_parse_int,
    )
    try:
        obj, _end = decoder.raw_decode(body)
    except (ValueError, RecursionError) as e:
        # json.JSONDecodeError is a ValueError; so are the number hooks above.
        # RecursionError comes from nesting deeper than the scanner allows.
        raise DecodeError(f"{_PREFIX}: {e}") from e

    if not isinstance(obj, dict):
        raise DecodeError(f"{_PREFIX}: expected a JSON object, got {kind_of(obj).value}")

    try:
        return Request.model_validate(obj)
    except ValidationError as e:
        raise DecodeError(f"{_PREFIX}: {_validation_message(e)}") from e
    except RecursionError as e:
        raise DecodeError(f"{_PREFIX}: {e}") from e


def decode_request(stream: TextIO) -> Request:
    try:
        text = stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DecodeError(f"{_PREFIX}: {e}") from e
    return parse_request(text)


def render_response(response: Response) -> str:
    payload: Any = response.to_wire()
    try:
        return json.dumps(payload, allow_nan=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise EncodingFailure(f"Failed to encode response: {e}") from e


def encode_response(response: Response, stream: TextIO) -> None:
    line = render_response(response)
    try:
        stream.write(line + "\n")
        stream.flush()
    except (OSError, ValueError) as e:
        # ValueError covers writes to a closed stream.
        raise EncodingFailure(f"Failed to write response: {e}") from e
