"""Pydantic schemas for calculator requests and responses."""

from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_serializer,
    field_validator,
    model_validator,
)

from .exceptions import InvalidBodyError


class OperationName(str, Enum):
    """Operation tags reported in successful responses."""

    addition = "addition"
    subtraction = "subtraction"
    multiplication = "multiplication"
    division = "division"
    power = "power"
    sqrt = "sqrt"
    percentage = "percentage"


class OperandModel(BaseModel):
    """Base for operand payloads.

    Operands must be finite JSON numbers; strings and booleans are not
    coerced, and ``NaN``, ``Infinity`` or out-of-range literals such as
    ``1e400`` are rejected. A ``null`` body or operand counts as missing.
    Keys match field names case-insensitively, last match wins.
    """

    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    @model_validator(mode="before")
    @classmethod
    def normalize_keys(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        normalized = {}
        for key, value in data.items():
            name = key.lower()
            if name in cls.model_fields:
                normalized[name] = value
        return normalized

    @field_validator("*", mode="before")
    @classmethod
    def null_is_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value


class BinaryRequest(OperandModel):
    """Operand pair for two-argument operations.

    Missing operands default to zero and unknown fields are ignored.

    Attributes:
        a: First operand.
        b: Second operand.
    """

    a: float = Field(default=0.0, description="First operand")
    b: float = Field(default=0.0, description="Second operand")


class UnaryRequest(OperandModel):
    """Single operand for one-argument operations.

    Attributes:
        a: The operand.
    """

    a: float = Field(default=0.0, description="Operand")


class CalculationResponse(BaseModel):
    """Successful calculation result.

    Attributes:
        result: Computed value.
        operation: Tag naming the operation performed.
    """

    model_config = ConfigDict(use_enum_values=True)

    result: float = Field(..., description="Computed value")
    operation: OperationName = Field(..., description="Operation performed")

    @field_serializer("result")
    def serialize_result(self, result: float) -> float | int:
        # Whole numbers are written without a trailing ".0"
        if result.is_integer() and abs(result) < 1e21:
            return int(result)
        return result


class ErrorResponse(BaseModel):
    """Error payload returned for every failed request."""

    error: str = Field(..., description="Human-readable error message")


def decode_request(
    body: bytes,
    schema: type[BinaryRequest] | type[UnaryRequest]
) -> BinaryRequest | UnaryRequest:
    """Decode a raw JSON body into an operand model.

    Args:
        body: Raw request body.
        schema: Model to decode into.

    Returns:
        The decoded operands.

    Raises:
        InvalidBodyError: If the body is not valid JSON, not an object,
            or carries non-numeric operands.
    """
    try:
        return schema.model_validate_json(body)
    except ValidationError as exc:
        raise InvalidBodyError(reason=str(exc)) from exc
