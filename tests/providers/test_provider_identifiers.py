# Purpose: id provider formats, bounds and uniqueness.

import re
import time
import uuid

import pytest

_ULID = re.compile(r"[0-9A-HJKMNP-TV-Z]{26}")


@pytest.mark.parametrize("function", ["uuid", "uuid4"])
def test_uuid_v4(ok, function):
    value, tag = ok("id", function)
    assert tag == "uuid"
    assert uuid.UUID(value).version == 4


def test_uuids_differ(ok):
    assert ok("id", "uuid")[0] != ok("id", "uuid")[0]


def test_ulid_shape_and_time_prefix(ok):
    before = time.time_ns() // 1_000_000
    value, tag = ok("id", "ulid")
    after = time.time_ns() // 1_000_000
    assert tag == "string"
    assert _ULID.fullmatch(value)
    decoded = 0
    for c in value[:10]:
        decoded = decoded * 32 + "0123456789ABCDEFGHJKMNPQRSTVWXYZ".index(c)
    assert before <= decoded <= after


def test_nanoid_defaults(ok):
    value, tag = ok("id", "nanoid")
    assert tag == "string"
    assert len(value) == 21
    assert re.fullmatch(r"[A-Za-z0-9_-]{21}", value)


def test_nanoid_custom_alphabet_and_size(ok):
    value, _ = ok("id", "nanoid", {"size": 40, "alphabet": "ab"})
    assert len(value) == 40
    assert set(value) <= {"a", "b"}


@pytest.mark.parametrize("size", [0, -3, 1025])
def test_nanoid_size_bounds(fails, size):
    assert fails("id", "nanoid", {"size": size}) == "size must be between 1 and 1024"


def test_nanoid_empty_alphabet(fails):
    assert fails("id", "nanoid", {"alphabet": ""}) == "alphabet must not be empty"


def test_snowflake_layout(ok):
    before = time.time_ns() // 1_000_000
    value, tag = ok("id", "snowflake", {"worker": 5, "sequence": 7})
    assert tag == "int"
    assert value & 0xFFF == 7
    assert (value >> 12) & 0x3FF == 5
    assert (value >> 22) >= before


def test_snowflake_masks_out_of_range_fields(ok):
    value, _ = ok("id", "snowflake", {"worker": 1024 + 3, "sequence": 4096 + 1})
    assert (value >> 12) & 0x3FF == 3
    assert value & 0xFFF == 1


def test_nanoid_small_alphabet_varies(ok):
    values = [ok("id", "nanoid", {"size": 8, "alphabet": "abc"})[0] for _ in range(5)]
    for value in values:
        assert len(value) == 8
        assert set(value) <= {"a", "b", "c"}
    assert len(set(values)) > 1
