"""
Account Management Module

A single bank account: balance, lifecycle state, daily withdrawal limit and
an append-only ledger of Transactions. Business-rule failures (inactive
account, insufficient funds, limit exceeded, bad target) are reported as a
False return with no state change; malformed construction arguments raise
ValueError.
"""

from decimal import Decimal
from datetime import datetime
from contextlib import ExitStack
from typing import Any, List, Optional, Tuple
from enum import Enum
import threading

from .clock import Clock, SystemClock
from .config import get_config
from .logging_config import get_logger, log_action
from .money import ZERO, quantize, to_money, try_money, MONEY_PLACES
from .transactions import Transaction, TransactionType

logger = get_logger("passbook.accounts")


class AccountType(Enum):
    """Banking product types"""
    CHECKING = "checking"
    SAVINGS = "savings"
    PREMIUM = "premium"

    @property
    def interest_rate(self) -> Decimal:
        """Rate applied by calculate_interest"""
        return {
            AccountType.CHECKING: Decimal('0.005'),  # 0.5%
            AccountType.SAVINGS: Decimal('0.02'),    # 2%
            AccountType.PREMIUM: Decimal('0.035'),   # 3.5%
        }[self]

    @property
    def daily_withdrawal_limit(self) -> Decimal:
        """Ceiling on cumulative withdrawals within one calendar day"""
        return {
            AccountType.CHECKING: Decimal('1000.00'),
            AccountType.SAVINGS: Decimal('1000.00'),
            AccountType.PREMIUM: Decimal('5000.00'),
        }[self]


class Account:
    """
    Bank account with a ledger, a daily withdrawal limit and interest accrual

    All mutators hold the account's lock for their full duration. Transfers
    lock both accounts in account_id order.
    """

    def __init__(
        self,
        account_id: str,
        account_type: AccountType,
        initial_balance: Any = ZERO,
        clock: Optional[Clock] = None
    ):
        if account_id is None or not isinstance(account_id, str) or not account_id.strip():
            raise ValueError("Account number cannot be null or empty")

        if not isinstance(account_type, AccountType):
            raise ValueError("Account type cannot be null")

        if initial_balance is None:
            raise ValueError("Initial balance cannot be null")
        balance = to_money(initial_balance)
        if balance < 0:
            raise ValueError("Initial balance cannot be negative")

        self._account_id = account_id
        self._account_type = account_type
        self._balance = balance
        self._active = True
        self._transactions: List[Transaction] = []
        self._daily_withdrawal_limit = account_type.daily_withdrawal_limit
        self._withdrawn_today = ZERO
        self._clock = clock or SystemClock()
        self._last_activity_at = self._clock.now()
        self._lock = threading.RLock()

        log_action(
            logger, "info", "Account opened",
            action="account_created", resource=account_id,
            extra={"account_type": account_type.value, "balance": str(balance)}
        )

    def __repr__(self) -> str:
        return (f"Account(account_id={self._account_id!r}, "
                f"account_type={self._account_type.name}, balance={self._balance})")

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def account_type(self) -> AccountType:
        return self._account_type

    @property
    def balance(self) -> Decimal:
        with self._lock:
            return self._balance

    @property
    def is_active(self) -> bool:
        with self._lock:
            return self._active

    @property
    def daily_withdrawal_limit(self) -> Decimal:
        return self._daily_withdrawal_limit

    @property
    def withdrawn_today(self) -> Decimal:
        with self._lock:
            return self._withdrawn_today

    @property
    def last_activity_at(self) -> datetime:
        with self._lock:
            return self._last_activity_at

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def transaction_history(self) -> Tuple[Transaction, ...]:
        """Snapshot of the ledger, oldest first"""
        with self._lock:
            return tuple(self._transactions)

    def get_transaction_history(self) -> List[Transaction]:
        """Copy of the ledger, oldest first"""
        with self._lock:
            return list(self._transactions)

    def deposit(self, amount: Any, description: str) -> bool:
        """
        Credit the account

        Returns:
            True if the deposit was posted, False if the account is inactive
            or the amount is missing or not positive
        """
        with self._lock:
            if not self._active:
                self._reject("deposit", "Account is not active", amount)
                return False

            value = try_money(amount)
            if value is None or value <= 0:
                self._reject("deposit", "Deposit amount must be positive", amount)
                return False

            self._balance += value
            self._record(TransactionType.DEPOSIT, value, description)
            return True

    def withdraw(self, amount: Any, description: str) -> bool:
        """
        Debit the account, subject to funds and the daily withdrawal limit

        The withdrawn-today counter resets when the last activity happened on
        an earlier calendar day. Only withdrawals check for that rollover.

        Returns:
            True if the withdrawal was posted, False otherwise
        """
        with self._lock:
            if not self._active:
                self._reject("withdraw", "Account is not active", amount)
                return False

            value = try_money(amount)
            if value is None or value <= 0:
                self._reject("withdraw", "Withdrawal amount must be positive", amount)
                return False

            if value > self._balance:
                self._reject("withdraw", "Insufficient funds", amount)
                return False

            withdrawn = self._withdrawn_today
            if self._last_activity_at.date() < self._clock.today():
                withdrawn = ZERO

            if withdrawn + value > self._daily_withdrawal_limit:
                self._reject("withdraw", "Daily withdrawal limit exceeded", amount,
                             withdrawn_today=str(withdrawn),
                             daily_limit=str(self._daily_withdrawal_limit))
                return False

            self._balance -= value
            self._withdrawn_today = withdrawn + value
            self._record(TransactionType.WITHDRAWAL, value, description)
            return True

    def transfer(self, target: Optional['Account'], amount: Any, description: str) -> bool:
        """
        Move funds to another account

        Either both balances change (sender -amount, receiver +amount, one
        ledger entry each) or neither does. If the deposit into the target
        fails after the withdrawal succeeded, the amount is deposited back
        into this account and False is returned.
        """
        if target is None:
            self._reject("transfer", "Transfer target is missing", amount)
            return False

        with ExitStack() as stack:
            for account in self._lock_order(target):
                stack.enter_context(account._lock)

            if not target._active:
                self._reject("transfer", "Transfer target is not active", amount,
                             target=target.account_id)
                return False

            if not self.withdraw(amount, f"Transfer to {target.account_id}"):
                return False

            if not target.deposit(amount, f"Transfer from {self._account_id}"):
                self.deposit(amount, get_config().rollback_description)
                log_action(
                    logger, "error", "Transfer deposit failed, withdrawal rolled back",
                    action="transfer_rolled_back", resource=self._account_id,
                    extra={"target": target.account_id, "amount": str(amount)}
                )
                return False

            log_action(
                logger, "info", "Transfer completed",
                action="transfer", resource=self._account_id,
                extra={"target": target.account_id, "amount": str(amount),
                       "description": description}
            )
            return True

    def calculate_interest(self) -> Decimal:
        """Interest the current balance would earn, rounded to two places"""
        with self._lock:
            if not self._active or self._balance <= 0:
                return ZERO

            interest = self._balance * self._account_type.interest_rate
            return quantize(interest, MONEY_PLACES)

    def apply_interest(self) -> None:
        """Credit calculated interest; no entry is recorded for zero interest"""
        with self._lock:
            if not self._active:
                return

            interest = self.calculate_interest()
            if interest > 0:
                self._balance += interest
                self._record(TransactionType.INTEREST, interest,
                             get_config().interest_description)

    def close_account(self) -> None:
        """
        Close the account permanently

        Only a zero balance can be closed. Closing an already closed account
        does nothing.
        """
        with self._lock:
            if not self._active:
                return

            if self._balance != 0:
                self._reject("close_account", "Cannot close account with non-zero balance",
                             self._balance)
                return

            self._active = False
            self._record(TransactionType.ACCOUNT_CLOSURE, ZERO,
                         get_config().closure_description)

    def _lock_order(self, other: 'Account') -> List['Account']:
        """Accounts in the global lock acquisition order"""
        if other is self:
            return [self]
        return sorted([self, other], key=lambda a: (a._account_id, id(a)))

    def _record(self, transaction_type: TransactionType, amount: Decimal,
                description: str) -> None:
        """Append a ledger entry; caller holds the lock"""
        now = self._clock.now()
        self._transactions.append(Transaction(
            transaction_type=transaction_type,
            amount=amount,
            description=description,
            timestamp=now
        ))
        self._last_activity_at = now

        log_action(
            logger, "info", f"Posted {transaction_type.value}",
            action=transaction_type.value, resource=self._account_id,
            extra={"amount": str(amount), "balance": str(self._balance)}
        )

    def _reject(self, operation: str, reason: str, amount: Any, **details) -> None:
        log_action(
            logger, "warning", reason,
            action=f"{operation}_rejected", resource=self._account_id,
            extra={"amount": str(amount), **details}
        )
