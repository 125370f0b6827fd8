#!/usr/bin/env python3
"""
Example: A day in the life of two accounts

Opens a checking and a savings account, moves money between them, runs
into the daily withdrawal limit, accrues interest and closes an account.
A FrozenClock makes the day rollover explicit.
"""

import os
import sys
from decimal import Decimal
from datetime import datetime, timedelta, timezone

# Add the passbook package to the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from passbook.accounts import Account, AccountType
from passbook.calculator import calculate_compound_interest, calculate_loan_payment
from passbook.clock import FrozenClock
from passbook.logging_config import setup_logging


def main():
    setup_logging(level="WARNING", log_format="text")
    clock = FrozenClock(datetime(2024, 6, 3, 9, 0, tzinfo=timezone.utc))

    print("1. Opening accounts")
    checking = Account("CHK-001", AccountType.CHECKING, Decimal('2000.00'), clock=clock)
    savings = Account("SAV-001", AccountType.SAVINGS, Decimal('5000.00'), clock=clock)
    print(f"   {checking!r}")
    print(f"   {savings!r}")

    print("\n2. Transfer 300.00 to savings")
    print(f"   ok={checking.transfer(savings, Decimal('300.00'), 'Monthly savings')}")
    print(f"   checking={checking.balance} savings={savings.balance}")

    print("\n3. Daily withdrawal limit")
    print(f"   withdraw 600.00 ok={checking.withdraw(Decimal('600.00'), 'Rent')}")
    # 300.00 + 600.00 already withdrawn today, so the limit turns this one away
    print(f"   withdraw 200.00 ok={checking.withdraw(Decimal('200.00'), 'Groceries')}")
    print(f"   withdrawn today={checking.withdrawn_today} of {checking.daily_withdrawal_limit}")

    clock.advance(timedelta(days=1))
    print(f"   next day, withdraw 100.00 ok={checking.withdraw(Decimal('100.00'), 'Groceries')}")

    print("\n4. Interest")
    print(f"   savings would earn {savings.calculate_interest()}")
    savings.apply_interest()
    print(f"   savings balance {savings.balance}")

    print("\n5. Closing checking")
    clock.advance(timedelta(days=1))
    print(f"   withdraw rest ok={checking.withdraw(checking.balance, 'Empty')}")
    checking.close_account()
    print(f"   active={checking.is_active}")

    print("\n6. Ledgers")
    for account in (checking, savings):
        print(f"   {account.account_id}")
        for transaction in account.transaction_history:
            print(f"     {transaction}")

    print("\n7. Planning")
    print(f"   1000.00 at 5% for 10 years: {calculate_compound_interest(Decimal('1000.00'), Decimal('0.05'), 10, 1)}")
    print(f"   12000.00 over 12 months at 1%: {calculate_loan_payment(Decimal('12000.00'), Decimal('0.01'), 12)}")


if __name__ == "__main__":
    main()
