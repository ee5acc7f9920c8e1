"""Structured results returned by account and bank operations."""

from dataclasses import dataclass, field
from decimal import Decimal

from bank_demo.models.enums import AccountKind, OutcomeKind

SUCCESS_KINDS = frozenset(
    {
        OutcomeKind.ACCOUNT_CREATED,
        OutcomeKind.DEPOSITED,
        OutcomeKind.WITHDRAWN,
        OutcomeKind.INTEREST_ADDED,
        OutcomeKind.TRANSFERRED,
        OutcomeKind.REPORT_STARTED,
        OutcomeKind.ACCOUNT_SUMMARY,
    }
)

WITHDRAWAL_KINDS = frozenset(
    {
        OutcomeKind.WITHDRAWN,
        OutcomeKind.WITHDRAWAL_LIMIT_REACHED,
        OutcomeKind.MINIMUM_BALANCE_BREACHED,
        OutcomeKind.INSUFFICIENT_BALANCE,
    }
)


@dataclass(frozen=True)
class Outcome:
    """Result of a single operation.

    ``balance`` is the account balance after the operation was applied (or
    declined). ``fee`` is set only when a checking withdrawal went into
    overdraft.
    """

    kind: OutcomeKind
    account_id: str | None = None
    account_kind: AccountKind | None = None
    holder: str | None = None
    amount: Decimal | None = None
    balance: Decimal | None = None
    fee: Decimal | None = None

    @property
    def ok(self) -> bool:
        """True when the operation was accepted."""
        return self.kind in SUCCESS_KINDS

    @property
    def overdraft(self) -> bool:
        return self.fee is not None


@dataclass
class TransferResult:
    """Ordered outcomes of a transfer, ending with its reported status.

    A transfer is reported as ``TRANSFERRED`` as soon as the pre-check on the
    source balance passes, even when the source account then declines the
    withdrawal. ``settled`` tells whether the money actually left the source.
    """

    from_id: str
    to_id: str
    amount: Decimal
    outcomes: list[Outcome] = field(default_factory=list)

    @property
    def status(self) -> OutcomeKind:
        return self.outcomes[-1].kind

    @property
    def reported_success(self) -> bool:
        return self.status is OutcomeKind.TRANSFERRED

    @property
    def withdrawal(self) -> Outcome | None:
        """The source account's withdraw outcome, if the withdraw step ran."""
        for outcome in self.outcomes:
            if outcome.account_id == self.from_id and outcome.kind in WITHDRAWAL_KINDS:
                return outcome
        return None

    @property
    def settled(self) -> bool:
        withdrawal = self.withdrawal
        return withdrawal is not None and withdrawal.ok
