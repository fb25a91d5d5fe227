"""
tests.conftest

Purpose:
    Shared fixtures: run one provider invocation in-process through the same
    boundary the CLI uses, capturing the exit status and the decoded response.
"""

from __future__ import annotations

import io
import json

import pytest

from up_functions.providers import get_operation_table
from up_functions.runner import run


def invoke_raw(provider: str, raw: str) -> tuple[int, str, str]:
    out, err = io.StringIO(), io.StringIO()
    status = run(
        get_operation_table(provider),
        provider=provider,
        stdin=io.StringIO(raw),
        stdout=out,
        stderr=err,
    )
    return status, out.getvalue(), err.getvalue()


@pytest.fixture()
def invoke():
    """
    invoke("math", "pow", {"base": 2, "exponent": 10}) -> (status, payload)
    """

    def _invoke(provider: str, function: str, params: dict | None = None, context: dict | None = None):
        req = {"function": function, "params": params or {}, "context": context or {}}
        status, out, _err = invoke_raw(provider, json.dumps(req))
        assert out.endswith("\n"), f"response not newline-terminated: {out!r}"
        return status, json.loads(out)

    return _invoke


@pytest.fixture()
def ok(invoke):
    """Successful call -> (value, type); fails the test on any error response."""

    def _ok(provider: str, function: str, params: dict | None = None, context: dict | None = None):
        status, payload = invoke(provider, function, params, context)
        assert status == 0, payload
        assert set(payload) == {"value", "type"}, payload
        return payload["value"], payload["type"]

    return _ok


@pytest.fixture()
def fails(invoke):
    """Failing call -> error message; fails the test on success."""

    def _fails(provider: str, function: str, params: dict | None = None, context: dict | None = None) -> str:
        status, payload = invoke(provider, function, params, context)
        assert status == 1, payload
        assert set(payload) == {"error"}, payload
        return payload["error"]

    return _fails


@pytest.fixture()
def invoke_text():
    """Feed raw stdin text -> (status, stdout, stderr)."""
    return invoke_raw
