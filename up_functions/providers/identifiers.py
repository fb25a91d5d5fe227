"""
up_functions.providers.identifiers

Purpose:
    Unique identifier generators (UUID v4, ULID, NanoID, Snowflake).

Notes:
    All randomness comes from the OS CSPRNG via `secrets`, so simultaneously running
    provider processes never share generator state.
"""

from __future__ import annotations

import secrets
import time
import uuid

from up_functions.config.default_config import DEFAULT_CONFIG
from up_functions.contracts.enums import TypeTag
from up_functions.contracts.protocol import OperationResult
from up_functions.contracts.values import Params
from up_functions.dispatch import OperationTable
from up_functions.errors import InvalidParameter
from up_functions.params import get_int, get_string

_CFG = DEFAULT_CONFIG["id"]

# Crockford base32 (no I, L, O, U).
_ULID_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_ULID_LENGTH = 26
_ULID_RANDOM_BITS = 80


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def new_uuid(params: Params, context: Params) -> OperationResult:
    return OperationResult(value=str(uuid.uuid4()), type=TypeTag.UUID)


def new_ulid(params: Params, context: Params) -> OperationResult:
    n = (_now_ms() << _ULID_RANDOM_BITS) | secrets.randbits(_ULID_RANDOM_BITS)
    chars = []
    for _ in range(_ULID_LENGTH):
        chars.append(_ULID_ALPHABET[n & 0x1F])
        n >>= 5
    return OperationResult(value="".join(reversed(chars)), type=TypeTag.STRING)


def new_nanoid(params: Params, context: Params) -> OperationResult:
    size = get_int(params, "size", _CFG["nanoid_size"])
    alphabet = get_string(params, "alphabet", _CFG["nanoid_alphabet"])

    max_size = _CFG["max_nanoid_size"]
    if size < 1 or size > max_size:
        raise InvalidParameter(f"size must be between 1 and {max_size}")
    if not alphabet:
        raise InvalidParameter("alphabet must not be empty")

    return OperationResult(value="".join(secrets.choice(alphabet) for _ in range(size)), type=TypeTag.STRING)


def new_snowflake(params: Params, context: Params) -> OperationResult:
    """(ms timestamp << 22) | (10-bit worker << 12) | 12-bit sequence"""
    worker = get_int(params, "worker", 0) & _CFG["snowflake_worker_mask"]
    sequence = get_int(params, "sequence", None)
    if sequence is None:
        sequence = secrets.randbelow(_CFG["snowflake_sequence_mask"] + 1)
    sequence &= _CFG["snowflake_sequence_mask"]

    return OperationResult(value=(_now_ms() << 22) | (worker << 12) | sequence, type=TypeTag.INT)


OPERATIONS: OperationTable = {
    "uuid": new_uuid,
    "uuid4": new_uuid,
    "ulid": new_ulid,
    "nanoid": new_nanoid,
    "snowflake": new_snowflake,
}
