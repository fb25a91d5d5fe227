"""
up_functions.runner

Purpose:
    The single boundary that turns one invocation's outcome into a response and an
    exit status. Nothing below this module terminates the process.

        value                      -> {"value", "type"}  exit 0
        ProviderError / crash      -> {"error"}          exit 1
        response cannot be written -> stderr diagnostic  exit 2
"""

from __future__ import annotations

import sys
from typing import TextIO

from up_functions.codec import decode_request, encode_response
from up_functions.contracts.protocol import Response
from up_functions.dispatch import OperationTable, dispatch
from up_functions.errors import EncodingFailure, ProviderError
from up_functions.utils.logging import LogCtx, get_logger, is_trace_enabled, with_ctx

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_UNREPORTABLE = 2

logger = get_logger(__name__)


def respond(table: OperationTable, stdin: TextIO, *, provider: str | None = None) -> Response:
    """Decode, dispatch and execute; every failure collapses into an error Response."""
    log = with_ctx(logger, LogCtx(provider=provider))
    try:
        request = decode_request(stdin)
        if is_trace_enabled(log):
            log.debug("request function=%r params=%s", request.function, sorted(request.params))
        result = dispatch(table, request, provider=provider)
    except ProviderError as e:
        log.debug("%s: %s", e.kind.value, e.message)
        return Response.failure(e.message)
    except Exception as e:
        log.exception("operation raised unexpectedly")
        return Response.failure(f"internal error: {type(e).__name__}: {e}")

    return Response.success(result)


def _diagnose(stderr: TextIO, message: str) -> None:
    try:
        stderr.write(message + "\n")
        stderr.flush()
    except (OSError, ValueError):
        # Nowhere left to report; the exit status still signals failure.
        pass


def run(
    table: OperationTable,
    *,
    provider: str | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Serve exactly one request and return the process exit status."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    response = respond(table, stdin, provider=provider)

    try:
        encode_response(response, stdout)
    except EncodingFailure as e:
        _diagnose(stderr, str(e))
        return EXIT_UNREPORTABLE

    return EXIT_OK if response.ok else EXIT_ERROR
