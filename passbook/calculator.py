"""
Financial Calculator Module

Stateless planning functions: compound interest projection, amortized loan
payment and a primality test. Nothing here touches Account state, takes a
lock or depends on the decimal context precision, so every function is safe
to call from any number of threads.

Powers are evaluated by repeated multiplication, one multiply per period,
with exact intermediate products. Rounding happens only where stated:
the per-period rate at 10 places and the result at 2 places, both
ROUND_HALF_UP.
"""

from decimal import Decimal
from typing import Any

from .logging_config import get_logger
from .money import (
    MONEY_PLACES, RATE_PLACES, ZERO, divide_half_up, exact_context, quantize,
    to_decimal
)

logger = get_logger("passbook.calculator")


def _require_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value


def calculate_compound_interest(
    principal: Any,
    annual_rate: Any,
    years: int,
    compound_frequency: int
) -> Decimal:
    """
    Project a principal forward with periodic compounding

    A = P * (1 + r/n) ** (n * t), with r/n rounded half-up to 10 places.

    Args:
        principal: Starting amount
        annual_rate: Annual rate as a fraction (0.05 for 5%)
        years: Whole number of years, >= 0
        compound_frequency: Compounding periods per year, > 0

    Returns:
        Final amount rounded half-up to 2 places

    Raises:
        ValueError: If principal or annual_rate is missing, years is negative
            or compound_frequency is not positive
    """
    if principal is None or annual_rate is None:
        raise ValueError("Invalid parameters for compound interest calculation")
    years = _require_int(years, "years")
    compound_frequency = _require_int(compound_frequency, "compound_frequency")
    if years < 0 or compound_frequency <= 0:
        raise ValueError("Invalid parameters for compound interest calculation")

    principal = to_decimal(principal)
    annual_rate = to_decimal(annual_rate)

    if principal == 0:
        return ZERO

    period_rate = divide_half_up(annual_rate, Decimal(compound_frequency), RATE_PLACES)
    total_periods = years * compound_frequency

    with exact_context():
        growth = 1 + period_rate
        result = principal
        for _ in range(total_periods):
            result = result * growth
        amount = quantize(result, MONEY_PLACES)

    logger.debug(
        "Compound interest: principal=%s rate=%s periods=%d result=%s",
        principal, annual_rate, total_periods, amount
    )
    return amount


def calculate_loan_payment(principal: Any, monthly_rate: Any, months: int) -> Decimal:
    """
    Fixed monthly payment that retires a loan over ``months`` payments

    M = P * r(1+r)^n / ((1+r)^n - 1), or P / n when the rate is zero.

    Raises:
        ValueError: If principal or monthly_rate is missing, months is not
            positive, or the rate makes the annuity factor zero
    """
    if principal is None or monthly_rate is None:
        raise ValueError("Invalid loan parameters")
    months = _require_int(months, "months")
    if months <= 0:
        raise ValueError("Invalid loan parameters")

    principal = to_decimal(principal)
    monthly_rate = to_decimal(monthly_rate)

    if principal <= 0:
        return ZERO

    if monthly_rate == 0:
        return divide_half_up(principal, Decimal(months), MONEY_PLACES)

    with exact_context():
        growth = 1 + monthly_rate
        numerator = monthly_rate
        compounded = Decimal(1)
        for _ in range(months):
            numerator = numerator * growth
            compounded = compounded * growth

        denominator = compounded - 1
        if denominator == 0:
            raise ValueError("Invalid loan parameters")
        dividend = principal * numerator

    payment = divide_half_up(dividend, denominator, MONEY_PLACES)
    logger.debug(
        "Loan payment: principal=%s rate=%s months=%d payment=%s",
        principal, monthly_rate, months, payment
    )
    return payment


def is_prime(n: int) -> bool:
    """Primality by trial division over 6k-1 / 6k+1 candidates"""
    n = _require_int(n, "n")
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    divisor = 5
    # Python ints are unbounded, so divisor * divisor cannot overflow
    while divisor * divisor <= n:
        if n % divisor == 0 or n % (divisor + 2) == 0:
            return False
        divisor += 6
    return True
