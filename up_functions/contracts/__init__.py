"""
Protocol contracts shared by every provider.
"""

__protocol_version__ = "1.0.0"

from .enums import TypeTag, ValueKind
from .error_contract import ErrorKind
from .protocol import OperationResult, Request, Response
from .values import DynamicValue, Params, infer_tag, is_number, kind_of, to_text

__all__ = [
    "__protocol_version__",
    "DynamicValue",
    "ErrorKind",
    "OperationResult",
    "Params",
    "Request",
    "Response",
    "TypeTag",
    "ValueKind",
    "infer_tag",
    "is_number",
    "kind_of",
    "to_text",
]
