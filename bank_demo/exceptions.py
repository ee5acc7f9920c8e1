"""Custom exception hierarchy for bank-demo.

Only argument errors are raised. Business-rule rejections (limits, reserves,
missing accounts) are returned as ``Outcome`` values instead.
"""


class BankDemoError(Exception):
    """Base exception for all bank-demo errors."""


class InvalidHolderNameError(BankDemoError, ValueError):
    """Raised when an account holder name is empty or whitespace."""


class InvalidAmountError(BankDemoError, ValueError):
    """Raised when a value cannot be interpreted as a monetary amount."""


class ConfigurationError(BankDemoError):
    """Raised when configuration is invalid or missing."""
