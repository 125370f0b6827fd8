"""
Test suite for transactions module

Tests the immutable ledger record and its rendering.
"""

import pytest
from dataclasses import FrozenInstanceError
from decimal import Decimal
from datetime import datetime, timezone

from passbook.transactions import Transaction, TransactionType


STAMP = datetime(2024, 5, 17, 10, 15, 0, tzinfo=timezone.utc)


class TestTransaction:

    def test_fields(self):
        txn = Transaction(TransactionType.DEPOSIT, Decimal('100.00'), "Paycheck", STAMP)
        assert txn.transaction_type == TransactionType.DEPOSIT
        assert txn.amount == Decimal('100.00')
        assert txn.description == "Paycheck"
        assert txn.timestamp == STAMP

    def test_immutable(self):
        txn = Transaction(TransactionType.DEPOSIT, Decimal('100.00'), "Paycheck", STAMP)
        with pytest.raises(FrozenInstanceError):
            txn.amount = Decimal('1.00')

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            Transaction(TransactionType.WITHDRAWAL, Decimal('-1.00'), "Bad", STAMP)

    def test_amount_must_be_decimal(self):
        with pytest.raises(ValueError, match="must be a Decimal"):
            Transaction(TransactionType.WITHDRAWAL, 1.0, "Bad", STAMP)

    def test_type_must_be_enum(self):
        with pytest.raises(ValueError, match="Invalid transaction type"):
            Transaction("deposit", Decimal('1.00'), "Bad", STAMP)

    def test_closure_carries_zero(self):
        txn = Transaction(TransactionType.ACCOUNT_CLOSURE, Decimal('0.00'), "Account closed", STAMP)
        assert txn.amount == 0
        assert not txn.is_credit
        assert not txn.is_debit

    def test_credit_and_debit_flags(self):
        assert Transaction(TransactionType.DEPOSIT, Decimal('1.00'), "", STAMP).is_credit
        assert Transaction(TransactionType.INTEREST, Decimal('1.00'), "", STAMP).is_credit
        assert Transaction(TransactionType.WITHDRAWAL, Decimal('1.00'), "", STAMP).is_debit

    def test_to_string(self):
        txn = Transaction(TransactionType.WITHDRAWAL, Decimal('1234.5'), "Rent", STAMP)
        assert txn.to_string() == "2024-05-17T10:15:00+00:00: WITHDRAWAL 1234.50 - Rent"
        assert str(txn) == txn.to_string()

    def test_to_dict(self):
        txn = Transaction(TransactionType.INTEREST, Decimal('5.00'), "Monthly interest", STAMP)
        assert txn.to_dict() == {
            "transaction_type": "interest",
            "amount": "5.00",
            "description": "Monthly interest",
            "timestamp": "2024-05-17T10:15:00+00:00",
        }
