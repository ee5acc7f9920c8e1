"""Pytest configuration and fixtures."""

import pytest

from bank_demo.models import CheckingAccount, PremiumAccount, SavingsAccount
from bank_demo.store import Bank


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def savings() -> SavingsAccount:
    """Savings account with room for several withdrawals."""
    return SavingsAccount("1001", "Alice", 1000)


@pytest.fixture
def checking() -> CheckingAccount:
    """Checking account with a small positive balance."""
    return CheckingAccount("1002", "Bob", 200)


@pytest.fixture
def premium() -> PremiumAccount:
    """Premium account above its tier threshold."""
    return PremiumAccount("1003", "Charlie", 15000)


@pytest.fixture
def bank(savings: SavingsAccount, checking: CheckingAccount, premium: PremiumAccount) -> Bank:
    """Bank holding the three fixture accounts, journal cleared."""
    bank = Bank()
    for account in (savings, checking, premium):
        bank.create_account(account)
    bank.journal.clear()
    return bank


EXPECTED_REPORT = """\
New account created for Alice
New account created for Bob
New account created for Charlie
Deposited $200.00 successfully.
Withdrawn $300.00 successfully.
Withdrawn $100.00 successfully.
Withdrawn $50.00 successfully.
Overdraft! Fee of $35 charged.
Withdrawn $250.00 successfully.
Withdrawn $5000.00 successfully.
Premium interest of $500.00 added.
Withdrawal limit reached (3 per month).
Deposited $100.00 successfully.
Transferred $100.00 successfully.

 --- All Accounts Report ---
-----------------------------
Account Number: 1001
Account Holder: Alice
Balance: $750.00
-----------------------------
Interest of $15.00 added.
-----------------------------
Account Number: 1002
Account Holder: Bob
Balance: $15.00
-----------------------------
-----------------------------
Account Number: 1003
Account Holder: Charlie
Balance: $10500.00
-----------------------------
Premium interest of $525.00 added.
"""


@pytest.fixture
def expected_report() -> str:
    """Console output of the scripted scenario in text mode."""
    return EXPECTED_REPORT
