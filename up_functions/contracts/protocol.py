"""
up_functions.contracts.protocol

Purpose:
    Request/response models for the provider protocol.

    Request  : {"function": str, "params": {...}, "context": {...}}
    Response : {"value": <any>, "type": <tag>}  |  {"error": <message>}

Notes:
    - A missing "function" decodes to "" so it fails dispatch as an unknown function.
    - null "function" decodes to ""; null "params"/"context" decode to empty mappings.
    - Unknown top-level keys are ignored.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator, model_validator

from up_functions.contracts.enums import TypeTag
from up_functions.contracts.values import DynamicValue


class Request(BaseModel):
    model_config = ConfigDict(extra="ignore")

    function: StrictStr = ""
    params: Dict[str, DynamicValue] = Field(default_factory=dict)
    context: Dict[str, DynamicValue] = Field(default_factory=dict)

    @field_validator("function", mode="before")
    @classmethod
    def _null_function(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("params", "context", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return {} if v is None else v


class OperationResult(BaseModel):
    """What an operation hands back to the dispatcher on success."""

    value: DynamicValue = None
    type: TypeTag


class Response(BaseModel):
    """
    Exactly one of {value, type} or {error} is populated.
    value may legitimately be null on success; type is what marks success.
    """

    value: DynamicValue = None
    type: Optional[TypeTag] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _value_error_exclusive(self) -> "Response":
        if self.error is not None:
            if self.type is not None or self.value is not None:
                raise ValueError("error response must not carry a value or type")
        elif self.type is None:
            raise ValueError("success response requires a type tag")
        return self

    @classmethod
    def success(cls, result: OperationResult) -> "Response":
        return cls(value=result.value, type=result.type)

    @classmethod
    def failure(cls, message: str) -> "Response":
        return cls(error=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_wire(self) -> Dict[str, Any]:
        if self.error is not None:
            return {"error": self.error}
        return {"value": self.value, "type": self.type.value}
