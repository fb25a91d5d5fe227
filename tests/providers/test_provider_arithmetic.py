# Purpose: math provider results, tags and error messages.

import pytest

from up_functions.providers.arithmetic import round_half_away


@pytest.mark.parametrize(
    "function,params,expected",
    [
        ("add", {"a": 1, "b": 2.5}, 3.5),
        ("sub", {"a": 1, "b": 2.5}, -1.5),
        ("mul", {"a": 4, "b": 2.5}, 10.0),
        ("div", {"a": 7, "b": 2}, 3.5),
        ("pow", {"base": 2, "exponent": 10}, 1024.0),
        ("sqrt", {"x": 16}, 4.0),
        ("abs", {"x": -3.5}, 3.5),
        ("ceil", {"x": 1.2}, 2.0),
        ("floor", {"x": -1.2}, -2.0),
        ("round", {"x": 2.5}, 3.0),
        ("round", {"x": -2.5}, -3.0),
        ("min", {"values": [3, -1, 2]}, -1.0),
        ("max", {"values": [3, -1, 2]}, 3.0),
    ],
)
def test_float_operations(ok, function, params, expected):
    value, tag = ok("math", function, params)
    assert tag == "float"
    assert value == pytest.approx(expected)


def test_missing_operands_default_to_zero(ok):
    assert ok("math", "add") == (0.0, "float")
    assert ok("math", "add", {"a": "5", "b": 1})[0] == 1.0


def test_min_max_treat_non_numbers_as_zero(ok):
    assert ok("math", "max", {"values": [-3, "x"]})[0] == 0.0


@pytest.mark.parametrize(
    "a,b,expected",
    [(7, 3, 1), (-7, 3, -1), (7, -3, 1), (7.9, 3.2, 1)],
)
def test_mod_truncates_and_keeps_dividend_sign(ok, a, b, expected):
    assert ok("math", "mod", {"a": a, "b": b}) == (expected, "int")


@pytest.mark.parametrize(
    "function,params,message",
    [
        ("div", {"a": 1, "b": 0}, "division by zero"),
        ("div", {"a": 1}, "division by zero"),
        ("mod", {"a": 1, "b": 0.5}, "modulo by zero"),
        ("sqrt", {"x": -1}, "cannot take square root of negative number"),
        ("mul", {"a": 1e308, "b": 10}, "result is not a finite number"),
        ("min", {"values": []}, "values parameter required and must be non-empty list"),
    ],
)
def test_errors(fails, function, params, message):
    assert fails("math", function, params) == message


def test_pow_domain_error_is_reported(fails):
    assert fails("math", "pow", {"base": -8, "exponent": 0.5}).startswith("pow(")


def test_pow_overflow_is_reported(fails):
    assert fails("math", "pow", {"base": 10, "exponent": 400}).startswith("pow(")


@pytest.mark.parametrize("x,expected", [(0.5, 1.0), (1.49, 1.0), (-0.5, -1.0), (-1.4, -1.0), (0.0, 0.0)])
def test_round_half_away(x, expected):
    assert round_half_away(x) == expected
