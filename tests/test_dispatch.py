# Purpose: Unit tests for exact-match dispatch over an operation table.

import pytest

from up_functions.contracts import OperationResult, Request, TypeTag
from up_functions.dispatch import dispatch
from up_functions.errors import InvalidParameter, UnknownFunction


class Spy:
    def __init__(self, result=None, exc=None):
        self.calls = []
        self.result = result or OperationResult(value="ok", type=TypeTag.STRING)
        self.exc = exc

    def __call__(self, params, context):
        self.calls.append((params, context))
        if self.exc is not None:
            raise self.exc
        return self.result


def test_dispatch_hit_passes_params_and_context():
    spy = Spy()
    req = Request(function="upper", params={"s": "x"}, context={"who": "host"})
    out = dispatch({"upper": spy}, req)
    assert out.value == "ok"
    assert spy.calls == [({"s": "x"}, {"who": "host"})]


def test_dispatch_miss_names_the_function_and_invokes_nothing():
    spy = Spy()
    with pytest.raises(UnknownFunction) as exc:
        dispatch({"upper": spy}, Request(function="bogus"))
    assert str(exc.value) == "Unknown function: bogus"
    assert spy.calls == []


def test_dispatch_is_case_sensitive():
    spy = Spy()
    with pytest.raises(UnknownFunction, match="Unknown function: Upper"):
        dispatch({"upper": spy}, Request(function="Upper"))


def test_dispatch_aliases_share_one_implementation():
    spy = Spy()
    table = {"uuid": spy, "uuid4": spy}
    dispatch(table, Request(function="uuid"))
    dispatch(table, Request(function="uuid4"))
    assert len(spy.calls) == 2


def test_dispatch_propagates_operation_errors_unchanged():
    err = InvalidParameter("division by zero")
    with pytest.raises(InvalidParameter) as exc:
        dispatch({"div": Spy(exc=err)}, Request(function="div"))
    assert exc.value is err
