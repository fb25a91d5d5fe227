"""
up_functions.errors

Purpose:
    Internal exception types for the provider protocol.
    Codec, dispatcher and operations raise ProviderError subclasses; the runner
    converts them into a single {"error": message} response and an exit status.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from up_functions.contracts.error_contract import ErrorKind


@dataclass(frozen=True)
class ProviderError(Exception):
    message: str
    kind: ErrorKind = field(default=ErrorKind.INVALID_PARAMETER, init=False)

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class DecodeError(ProviderError):
    kind: ErrorKind = field(default=ErrorKind.DECODE_ERROR, init=False)


@dataclass(frozen=True)
class UnknownFunction(ProviderError):
    kind: ErrorKind = field(default=ErrorKind.UNKNOWN_FUNCTION, init=False)

    @classmethod
    def named(cls, function: str) -> "UnknownFunction":
        return cls(f"Unknown function: {function}")


@dataclass(frozen=True)
class MissingParameter(ProviderError):
    kind: ErrorKind = field(default=ErrorKind.MISSING_PARAMETER, init=False)


@dataclass(frozen=True)
class InvalidParameter(ProviderError):
    kind: ErrorKind = field(default=ErrorKind.INVALID_PARAMETER, init=False)


@dataclass(frozen=True)
class IOFailure(ProviderError):
    kind: ErrorKind = field(default=ErrorKind.IO_FAILURE, init=False)


@dataclass(frozen=True)
class EncodingFailure(ProviderError):
    kind: ErrorKind = field(default=ErrorKind.ENCODING_FAILURE, init=False)
