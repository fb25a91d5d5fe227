# Purpose: Unit tests for the parameter coercion layer (default-on-absence-or-mismatch contract).

import pytest

from up_functions.errors import MissingParameter
from up_functions.params import (
    as_float,
    get_bool,
    get_float,
    get_int,
    get_list,
    get_string,
    require_string,
    require_value,
)


def test_int_missing_key_returns_default():
    assert get_int({}, "x", 10) == 10


def test_int_wrong_type_behaves_like_absence():
    assert get_int({"x": "not-a-number"}, "x", 10) == 10


@pytest.mark.parametrize("raw", [True, None, [1], {"v": 1}, "5"])
def test_int_non_numeric_shapes_yield_default(raw):
    assert get_int({"x": raw}, "x", 10) == 10


@pytest.mark.parametrize("raw,expected", [(7, 7), (7.9, 7), (-7.9, -7), (0.0, 0)])
def test_int_accepts_integral_and_fractional_numbers(raw, expected):
    v = get_int({"x": raw}, "x", 10)
    assert v == expected
    assert isinstance(v, int)


def test_float_accepts_integral_numbers():
    v = get_float({"x": 2}, "x", 0.5)
    assert v == 2.0
    assert isinstance(v, float)


def test_float_wrong_type_behaves_like_absence():
    assert get_float({"x": "2.5"}, "x", 0.5) == 0.5
    assert get_float({"x": False}, "x", 0.5) == 0.5


def test_string_only_exact_strings():
    assert get_string({"s": "hi"}, "s", "d") == "hi"
    assert get_string({"s": ""}, "s", "d") == ""
    assert get_string({"s": 5}, "s", "d") == "d"
    assert get_string({}, "s", "d") == "d"


def test_bool_only_exact_booleans():
    assert get_bool({"b": True}, "b", False) is True
    assert get_bool({"b": 1}, "b", False) is False


def test_list_requires_a_sequence():
    assert get_list({"items": [1, 2]}, "items") == [1, 2]
    assert get_list({"items": []}, "items") == []

    with pytest.raises(MissingParameter, match="items parameter required and must be a list"):
        get_list({}, "items")
    with pytest.raises(MissingParameter, match="items parameter required and must be a list"):
        get_list({"items": "1,2"}, "items")


def test_list_non_empty():
    with pytest.raises(MissingParameter, match="values parameter required and must be non-empty list"):
        get_list({"values": []}, "values", non_empty=True)


def test_require_string_treats_empty_and_wrong_type_as_missing():
    assert require_string({"key": "HOME"}, "key") == "HOME"
    for params in ({}, {"key": ""}, {"key": 3}):
        with pytest.raises(MissingParameter) as exc:
            require_string(params, "key")
        assert str(exc.value) == "key parameter required"


def test_require_value_accepts_null():
    assert require_value({"template": None}, "template") is None
    with pytest.raises(MissingParameter, match="template parameter required"):
        require_value({}, "template")


def test_as_float():
    assert as_float(3) == 3.0
    assert as_float("3") == 0.0
    assert as_float(True, default=-1.0) == -1.0
