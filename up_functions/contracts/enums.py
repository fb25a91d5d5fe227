"""
up_functions/contracts/enums.py

Purpose:
    Shared enums used across the protocol models, operation tables and the runner
    to avoid circular imports.
"""

from __future__ import annotations

from enum import Enum


class TypeTag(str, Enum):
    """Advisory tag telling the host how to interpret/format a successful value."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    LIST = "list"
    BLOCK = "block"
    UUID = "uuid"
    TS = "ts"
    DUR = "dur"


class ValueKind(str, Enum):
    """The six shapes a DynamicValue can take after a generic JSON decode."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
