"""
Passbook

A single-account banking ledger with daily withdrawal limits, atomic
transfers and interest accrual, plus fixed-point financial calculators.
All monetary values use Decimal with round-half-up at two places.
"""

from .accounts import Account, AccountType
from .calculator import (
    calculate_compound_interest, calculate_loan_payment, is_prime
)
from .clock import Clock, FrozenClock, SystemClock
from .transactions import Transaction, TransactionType

__version__ = "1.0.0"

__all__ = [
    "Account",
    "AccountType",
    "Clock",
    "FrozenClock",
    "SystemClock",
    "Transaction",
    "TransactionType",
    "calculate_compound_interest",
    "calculate_loan_payment",
    "is_prime",
]
