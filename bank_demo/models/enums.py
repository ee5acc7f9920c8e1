"""Enumeration types for the account domain."""

from enum import Enum


class AccountKind(str, Enum):
    SAVINGS = "SAVINGS"
    CHECKING = "CHECKING"
    PREMIUM = "PREMIUM"


class OutcomeKind(str, Enum):
    ACCOUNT_CREATED = "ACCOUNT_CREATED"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    DEPOSITED = "DEPOSITED"
    DEPOSIT_REJECTED = "DEPOSIT_REJECTED"
    WITHDRAWN = "WITHDRAWN"
    WITHDRAWAL_LIMIT_REACHED = "WITHDRAWAL_LIMIT_REACHED"
    MINIMUM_BALANCE_BREACHED = "MINIMUM_BALANCE_BREACHED"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    INTEREST_ADDED = "INTEREST_ADDED"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    TRANSFERRED = "TRANSFERRED"
    REPORT_STARTED = "REPORT_STARTED"
    ACCOUNT_SUMMARY = "ACCOUNT_SUMMARY"
