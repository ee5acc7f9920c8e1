"""Account hierarchy: the abstract base and its three variants.

Each variant owns its withdrawal rule. Savings and Premium accounts also
mix in ``InterestBearing``. Every balance change, including fees and
interest, goes through ``Account._change_balance``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar

from bank_demo.exceptions import InvalidHolderNameError
from bank_demo.models.base import ZERO, to_amount
from bank_demo.models.enums import AccountKind, OutcomeKind
from bank_demo.models.outcome import Outcome

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 29


def format_description(
    account_id: str, holder: str, balance: Decimal, currency_symbol: str = "$"
) -> str:
    """Render the dashed account block used by ``describe`` and the report."""
    return "\n".join(
        [
            SEPARATOR,
            f"Account Number: {account_id}",
            f"Account Holder: {holder}",
            f"Balance: {currency_symbol}{balance:.2f}",
            SEPARATOR,
        ]
    )


@dataclass(frozen=True)
class AccountSnapshot:
    """Read-only view of an account at one point in time."""

    account_id: str
    holder_name: str
    balance: Decimal
    kind: AccountKind


class Account(ABC):
    """Bank account base class.

    Parameters
    ----------
    account_id : str
        Identifier, fixed for the life of the account.
    holder_name : str
        Account holder; must not be blank.
    balance : Decimal | int | float | str
        Opening balance.
    """

    kind: ClassVar[AccountKind]

    def __init__(self, account_id: str, holder_name: str, balance: Any = ZERO) -> None:
        self._account_id = str(account_id)
        self._holder_name = _validated_name(holder_name)
        self._balance = to_amount(balance)

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @holder_name.setter
    def holder_name(self, name: str) -> None:
        self._holder_name = _validated_name(name)

    @property
    def balance(self) -> Decimal:
        return self._balance

    def _change_balance(self, delta: Decimal) -> None:
        """Add ``delta`` to the balance. Only variant logic may call this."""
        self._balance += delta
        logger.debug("Account %s balance changed by %s to %s", self._account_id, delta, self._balance)

    def _outcome(self, kind: OutcomeKind, **kwargs: Any) -> Outcome:
        return Outcome(
            kind=kind,
            account_id=self._account_id,
            account_kind=self.kind,
            holder=self._holder_name,
            balance=self._balance,
            **kwargs,
        )

    def deposit(self, amount: Any) -> Outcome:
        """Credit a positive amount. Non-positive amounts are rejected."""
        amount = to_amount(amount)
        if amount <= ZERO:
            logger.info("Account %s rejected non-positive deposit %s", self._account_id, amount)
            return self._outcome(OutcomeKind.DEPOSIT_REJECTED, amount=amount)
        self._change_balance(amount)
        return self._outcome(OutcomeKind.DEPOSITED, amount=amount)

    @abstractmethod
    def withdraw(self, amount: Any) -> Outcome:
        """Debit ``amount`` according to the variant's rules."""

    def snapshot(self) -> AccountSnapshot:
        return AccountSnapshot(
            account_id=self._account_id,
            holder_name=self._holder_name,
            balance=self._balance,
            kind=self.kind,
        )

    def describe(self, currency_symbol: str = "$") -> str:
        """Formatted id, holder and two-decimal balance. Never mutates."""
        return format_description(
            self._account_id, self._holder_name, self._balance, currency_symbol
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(account_id={self._account_id!r}, "
            f"holder_name={self._holder_name!r}, balance={self._balance!r})"
        )


class InterestBearing(ABC):
    """Capability mixin for accounts that accrue interest on their balance."""

    INTEREST_RATE: ClassVar[Decimal]

    @abstractmethod
    def calculate_interest(self) -> Outcome:
        """Credit interest on the current balance."""


def _apply_interest(account: Account, rate: Decimal) -> Outcome:
    # Compounds: each call earns on the balance left by the previous one.
    interest = account.balance * rate
    account._change_balance(interest)
    return account._outcome(OutcomeKind.INTEREST_ADDED, amount=interest)


class SavingsAccount(Account, InterestBearing):
    """Savings account.

    - at most ``MAX_WITHDRAWALS`` withdrawals per session
    - balance may not drop below ``MIN_BALANCE``
    - 2% interest per ``calculate_interest`` call
    """

    kind = AccountKind.SAVINGS
    MIN_BALANCE: ClassVar[Decimal] = Decimal("500.0")
    INTEREST_RATE: ClassVar[Decimal] = Decimal("0.02")
    MAX_WITHDRAWALS: ClassVar[int] = 3

    def __init__(self, account_id: str, holder_name: str, balance: Any = ZERO) -> None:
        super().__init__(account_id, holder_name, balance)
        self._withdrawal_count = 0

    @property
    def withdrawal_count(self) -> int:
        return self._withdrawal_count

    def withdraw(self, amount: Any) -> Outcome:
        amount = to_amount(amount)
        if self._withdrawal_count >= self.MAX_WITHDRAWALS:
            logger.info("Account %s hit the withdrawal limit", self.account_id)
            return self._outcome(OutcomeKind.WITHDRAWAL_LIMIT_REACHED, amount=amount)
        if self.balance - amount < self.MIN_BALANCE:
            logger.info("Account %s withdrawal of %s would breach minimum balance", self.account_id, amount)
            return self._outcome(OutcomeKind.MINIMUM_BALANCE_BREACHED, amount=amount)
        self._change_balance(-amount)
        self._withdrawal_count += 1
        return self._outcome(OutcomeKind.WITHDRAWN, amount=amount)

    def calculate_interest(self) -> Outcome:
        return _apply_interest(self, self.INTEREST_RATE)


class CheckingAccount(Account):
    """Checking account with no balance floor.

    Any withdrawal that leaves the balance negative costs ``OVERDRAFT_FEE``.
    """

    kind = AccountKind.CHECKING
    OVERDRAFT_FEE: ClassVar[Decimal] = Decimal("35.0")

    def withdraw(self, amount: Any) -> Outcome:
        amount = to_amount(amount)
        self._change_balance(-amount)
        if self.balance < ZERO:
            self._change_balance(-self.OVERDRAFT_FEE)
            logger.info("Account %s overdrawn, fee %s charged", self.account_id, self.OVERDRAFT_FEE)
            return self._outcome(OutcomeKind.WITHDRAWN, amount=amount, fee=self.OVERDRAFT_FEE)
        return self._outcome(OutcomeKind.WITHDRAWN, amount=amount)


class PremiumAccount(Account, InterestBearing):
    """Premium account: never negative, 5% interest.

    ``MIN_BALANCE`` is the advertised tier threshold. Withdrawals only check
    that the balance stays non-negative.
    """

    kind = AccountKind.PREMIUM
    MIN_BALANCE: ClassVar[Decimal] = Decimal("10000.0")
    INTEREST_RATE: ClassVar[Decimal] = Decimal("0.05")

    def withdraw(self, amount: Any) -> Outcome:
        amount = to_amount(amount)
        if self.balance - amount < ZERO:
            logger.info("Account %s has insufficient balance for %s", self.account_id, amount)
            return self._outcome(OutcomeKind.INSUFFICIENT_BALANCE, amount=amount)
        self._change_balance(-amount)
        return self._outcome(OutcomeKind.WITHDRAWN, amount=amount)

    def calculate_interest(self) -> Outcome:
        return _apply_interest(self, self.INTEREST_RATE)


ACCOUNT_CLASSES: dict[AccountKind, type[Account]] = {
    AccountKind.SAVINGS: SavingsAccount,
    AccountKind.CHECKING: CheckingAccount,
    AccountKind.PREMIUM: PremiumAccount,
}


def _validated_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidHolderNameError("Account holder name cannot be empty.")
    return name
