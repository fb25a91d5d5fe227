"""
tests.test_runner

Purpose:
    Exit-contract tests for the single runner boundary.

Covers:
    - value -> {"value","type"} + exit 0
    - every reported error -> {"error"} + exit 1 (uniform across providers)
    - unwritable response -> stderr diagnostic + exit 2
    - value/error exclusivity over a mixed bag of requests
"""

from __future__ import annotations

import io
import json

import pytest

from up_functions.contracts import OperationResult, TypeTag
from up_functions.providers import provider_names
from up_functions.runner import EXIT_ERROR, EXIT_OK, EXIT_UNREPORTABLE, run


class BrokenPipeStream(io.StringIO):
    def write(self, s):
        raise BrokenPipeError(32, "Broken pipe")


def _run(table, raw: str, stdout=None):
    out = stdout if stdout is not None else io.StringIO()
    err = io.StringIO()
    status = run(table, stdin=io.StringIO(raw), stdout=out, stderr=err)
    return status, out, err


@pytest.mark.parametrize("provider", provider_names())
def test_unknown_function_is_uniform_across_providers(provider, invoke_text):
    status, out, _err = invoke_text(provider, '{"function":"bogus"}')
    assert status == 1
    assert json.loads(out) == {"error": "Unknown function: bogus"}


@pytest.mark.parametrize("provider", provider_names())
def test_decode_failure_forces_exit_1_for_every_provider(provider, invoke_text):
    status, out, _err = invoke_text(provider, '{"function": "get", "params": {')
    assert status == 1
    payload = json.loads(out)
    assert set(payload) == {"error"}
    assert payload["error"].startswith("Invalid request: ")


def test_decode_failure_invokes_nothing():
    calls = []

    def op(params, context):
        calls.append(params)
        return OperationResult(value=1, type=TypeTag.INT)

    status, _out, _err = _run({"op": op}, '{"function": "op"')
    assert status == EXIT_ERROR
    assert calls == []


def test_success_exit_0():
    table = {"one": lambda p, c: OperationResult(value=1, type=TypeTag.INT)}
    status, out, _err = _run(table, '{"function":"one"}')
    assert status == EXIT_OK
    assert json.loads(out.getvalue()) == {"value": 1, "type": "int"}


def test_unexpected_exception_is_reported_not_raised():
    def op(params, context):
        raise RuntimeError("kaboom")

    status, out, err = _run({"op": op}, '{"function":"op"}')
    assert status == EXIT_ERROR
    assert json.loads(out.getvalue()) == {"error": "internal error: RuntimeError: kaboom"}


def test_closed_stdout_exits_non_zero_with_stderr_diagnostic():
    closed = io.StringIO()
    closed.close()
    table = {"one": lambda p, c: OperationResult(value=1, type=TypeTag.INT)}
    status, _out, err = _run(table, '{"function":"one"}', stdout=closed)
    assert status == EXIT_UNREPORTABLE
    assert "Failed to write response" in err.getvalue()


def test_broken_pipe_exits_non_zero():
    status, _out, err = _run({}, '{"function":"x"}', stdout=BrokenPipeStream())
    assert status == EXIT_UNREPORTABLE
    assert err.getvalue()


@pytest.mark.parametrize(
    "provider,function,params,expected_status",
    [
        ("math", "add", {"a": 1, "b": 2}, 0),
        ("math", "div", {"a": 1, "b": 0}, 1),
        ("string", "upper", {}, 1),
        ("string", "upper", {"s": "x"}, 0),
        ("list", "index", {"items": [None], "index": 0}, 0),
        ("list", "index", {"items": [], "index": 0}, 1),
        ("random", "choice", {"items": [None]}, 0),
        ("env", "get", {"key": "UP_FUNCTIONS_SURELY_UNSET"}, 0),
        ("time", "parse", {"time": "yesterday"}, 1),
        ("id", "nanoid", {"size": -1}, 1),
    ],
)
def test_value_error_exclusivity(invoke, provider, function, params, expected_status):
    status, payload = invoke(provider, function, params)
    assert status == expected_status
    if status == 0:
        assert set(payload) == {"value", "type"}
        assert isinstance(payload["type"], str) and payload["type"]
    else:
        assert set(payload) == {"error"}
        assert isinstance(payload["error"], str) and payload["error"]
