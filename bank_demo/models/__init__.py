"""Domain models for the bank account demo."""

from bank_demo.models.account import (
    ACCOUNT_CLASSES,
    Account,
    AccountSnapshot,
    CheckingAccount,
    InterestBearing,
    PremiumAccount,
    SavingsAccount,
)
from bank_demo.models.base import to_amount
from bank_demo.models.enums import AccountKind, OutcomeKind
from bank_demo.models.outcome import Outcome, TransferResult

__all__ = [
    "ACCOUNT_CLASSES",
    "Account",
    "AccountKind",
    "AccountSnapshot",
    "CheckingAccount",
    "InterestBearing",
    "Outcome",
    "OutcomeKind",
    "PremiumAccount",
    "SavingsAccount",
    "TransferResult",
    "to_amount",
]
