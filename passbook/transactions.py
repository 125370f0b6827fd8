"""
Transaction Module

Immutable ledger records. A Transaction is only ever created by an Account
as the side effect of a successful mutation; the timestamp comes from the
account's clock, never from the caller.
"""

from decimal import Decimal
from datetime import datetime
from dataclasses import dataclass
from typing import Any, Dict
from enum import Enum

from .money import format_money


class TransactionType(Enum):
    """Types of ledger events"""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    INTEREST = "interest"
    ACCOUNT_CLOSURE = "account_closure"


@dataclass(frozen=True)
class Transaction:
    """
    One entry in an account's ledger
    """
    transaction_type: TransactionType
    amount: Decimal
    description: str
    timestamp: datetime

    def __post_init__(self):
        if not isinstance(self.transaction_type, TransactionType):
            raise ValueError(f"Invalid transaction type: {self.transaction_type!r}")

        if not isinstance(self.amount, Decimal):
            raise ValueError("Transaction amount must be a Decimal")

        if self.amount < Decimal('0'):
            raise ValueError("Transaction amount cannot be negative")

    @property
    def is_credit(self) -> bool:
        """Check if this entry increased the balance"""
        return self.transaction_type in (TransactionType.DEPOSIT, TransactionType.INTEREST)

    @property
    def is_debit(self) -> bool:
        """Check if this entry decreased the balance"""
        return self.transaction_type == TransactionType.WITHDRAWAL

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation with Decimal and datetime as strings"""
        return {
            "transaction_type": self.transaction_type.value,
            "amount": str(self.amount),
            "description": self.description,
            "timestamp": self.timestamp.isoformat(),
        }

    def to_string(self) -> str:
        """Format for display"""
        return (f"{self.timestamp.isoformat()}: {self.transaction_type.name} "
                f"{format_money(self.amount)} - {self.description}")

    def __str__(self) -> str:
        return self.to_string()
