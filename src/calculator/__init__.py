"""Calculator module - arithmetic endpoints and their service layer."""

from .schemas import (
    BinaryRequest,
    UnaryRequest,
    CalculationResponse,
    ErrorResponse,
    OperationName,
    decode_request,
)
from .exceptions import (
    CalculatorError,
    InvalidBodyError,
    DomainError,
    DivisionByZeroError,
    NegativeSquareRootError,
)
from .router import router, CALCULATION_PATHS


__all__ = [
    # Schemas
    "BinaryRequest",
    "UnaryRequest",
    "CalculationResponse",
    "ErrorResponse",
    "OperationName",
    "decode_request",
    # Exceptions
    "CalculatorError",
    "InvalidBodyError",
    "DomainError",
    "DivisionByZeroError",
    "NegativeSquareRootError",
    # Router
    "router",
    "CALCULATION_PATHS",
]
