"""Arithmetic operations behind the calculator endpoints.

Every function is pure: operands in, float out. Division by zero and square
roots of negative numbers are the only rejected inputs; NaN and infinities
otherwise propagate through standard floating-point rules.
"""

import math

from .exceptions import DivisionByZeroError, NegativeSquareRootError


def add(a: float, b: float) -> float:
    """Return the sum of two numbers."""
    return a + b


def subtract(a: float, b: float) -> float:
    """Return the difference of two numbers."""
    return a - b


def multiply(a: float, b: float) -> float:
    """Return the product of two numbers."""
    return a * b


def divide(a: float, b: float) -> float:
    """Divide a by b.

    Args:
        a: Dividend.
        b: Divisor.

    Returns:
        The quotient.

    Raises:
        DivisionByZeroError: If the divisor is zero.
    """
    if b == 0:
        raise DivisionByZeroError()
    return a / b


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer() and math.fmod(value, 2) != 0


def power(a: float, b: float) -> float:
    """Raise a to the power of b with IEEE pow semantics.

    ``math.pow`` raises where C's ``pow`` returns a special value. Overflow
    and zero bases with negative exponents map to a signed infinity; any
    other domain error is NaN.

    Args:
        a: Base.
        b: Exponent.

    Returns:
        a raised to b.
    """
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and _is_odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        if a == 0:
            # -0.0 keeps its sign under odd integer exponents
            if math.copysign(1.0, a) < 0 and _is_odd_integer(b):
                return -math.inf
            return math.inf
        return math.nan


def square_root(a: float) -> float:
    """Return the non-negative square root of a.

    Raises:
        NegativeSquareRootError: If a is negative.
    """
    if a < 0:
        raise NegativeSquareRootError(a)
    return math.sqrt(a)


def percentage(a: float, b: float) -> float:
    """Return a percent of b, e.g. ``percentage(20, 100) == 20``."""
    return (a / 100) * b
