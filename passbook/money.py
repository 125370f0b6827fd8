"""
Money Primitive Module

Fixed-point Decimal helpers for monetary values. The system works in a
single implicit currency with a scale of two places and ROUND_HALF_UP.
NEVER uses float for monetary values.
"""

from decimal import (
    Decimal, ROUND_HALF_UP, InvalidOperation, MAX_EMAX, MAX_PREC, MIN_EMIN,
    getcontext, localcontext
)
from typing import Any, Optional

# Set global decimal context for financial precision
getcontext().prec = 28  # High precision for financial calculations

MONEY_PLACES = 2
RATE_PLACES = 10  # Intermediate precision for per-period rates

ZERO = Decimal('0.00')
CENT = Decimal('0.01')


def decimal_from_string(value: str) -> Decimal:
    """
    Safely convert string to Decimal

    Accepts plain decimal notation with optional sign and exponent
    ("12.50", "-3", "1e3"). Anything else is rejected rather than guessed at.

    Args:
        value: String representation of number

    Returns:
        Decimal value

    Raises:
        ValueError: If string cannot be converted to valid Decimal
    """
    if not value or not isinstance(value, str):
        raise ValueError("Value must be a non-empty string")

    try:
        result = Decimal(value.strip())
    except InvalidOperation:
        raise ValueError(f"Cannot convert '{value}' to Decimal")

    if not result.is_finite():
        raise ValueError(f"Cannot convert '{value}' to Decimal")
    return result


def to_decimal(value: Any) -> Decimal:
    """
    Coerce an int, str, float or Decimal into a finite Decimal

    Floats go through str() first so that 0.1 becomes Decimal('0.1') rather
    than its binary expansion.

    Raises:
        ValueError: If the value is None, a bool, or not numeric
    """
    if value is None or isinstance(value, bool):
        raise ValueError(f"Not a numeric value: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        return decimal_from_string(value)
    else:
        raise ValueError(f"Not a numeric value: {value!r}")

    if not result.is_finite():
        raise ValueError(f"Not a finite value: {value!r}")
    return result


def quantize(value: Decimal, places: int) -> Decimal:
    """Round to a fixed number of decimal places using ROUND_HALF_UP"""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def to_money(value: Any) -> Decimal:
    """Coerce a value to Decimal and round it to two places"""
    return quantize(to_decimal(value), MONEY_PLACES)


def try_money(value: Any) -> Optional[Decimal]:
    """Like to_money, but returns None for values that are not numeric"""
    try:
        return to_money(value)
    except ValueError:
        return None


def exact_context():
    """
    Decimal context in which addition, subtraction and multiplication are
    exact. Division must go through divide_half_up instead.
    """
    return localcontext(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def divide_half_up(dividend: Decimal, divisor: Decimal, places: int) -> Decimal:
    """
    Divide and round the exact quotient half-up to ``places`` decimals

    The quotient is computed with integer division on scaled operands, so the
    result does not depend on the precision of the active context.

    Raises:
        ValueError: If divisor is zero
    """
    if divisor == 0:
        raise ValueError("Division by zero")

    negative = (dividend < 0) != (divisor < 0)
    with exact_context():
        scaled = abs(dividend).scaleb(places)
        quotient, remainder = divmod(scaled, abs(divisor))
        if remainder * 2 >= abs(divisor):
            quotient += 1
        result = quotient.scaleb(-places)
        if negative and result:
            result = -result
        return quantize(result, places)


def format_money(value: Decimal) -> str:
    """Format for display"""
    return f"{quantize(value, MONEY_PLACES):.{MONEY_PLACES}f}"
