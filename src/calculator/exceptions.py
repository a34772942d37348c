"""Custom exceptions for the calculator API."""


class CalculatorError(Exception):
    """Base exception for all calculator API errors."""
    
    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class InvalidBodyError(CalculatorError):
    """Raised when a request body cannot be decoded into operands."""
    
    def __init__(self, reason: str = ""):
        super().__init__(
            message="invalid request body",
            code="INVALID_BODY"
        )
        self.reason = reason


class DomainError(CalculatorError):
    """Base exception for arithmetic rule violations."""
    pass


class DivisionByZeroError(DomainError):
    """Raised when dividing by zero."""
    
    def __init__(self):
        super().__init__(
            message="division by zero",
            code="DIVISION_BY_ZERO"
        )


class NegativeSquareRootError(DomainError):
    """Raised when taking the square root of a negative number.
    
    Attributes:
        value: The negative operand.
    """
    
    def __init__(self, value: float):
        super().__init__(
            message="cannot calculate square root of negative number",
            code="NEGATIVE_SQUARE_ROOT"
        )
        self.value = value
