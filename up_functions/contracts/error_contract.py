"""
up_functions.contracts.error_contract

Purpose:
    Stable error taxonomy for the provider protocol.
    Only the human-readable message crosses the process boundary; the kind is
    kept for logging and for the runner's exit-status decision.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    DECODE_ERROR = "DecodeError"
    UNKNOWN_FUNCTION = "UnknownFunction"
    MISSING_PARAMETER = "MissingParameter"
    INVALID_PARAMETER = "InvalidParameter"
    IO_FAILURE = "IOFailure"

    # Fatal: the response itself could not be delivered.
    ENCODING_FAILURE = "EncodingFailure"
