"""Console sink: renders operation outcomes as status lines."""

import json
import logging
from decimal import Decimal
from typing import Iterable

from bank_demo.models import AccountKind, Outcome, OutcomeKind
from bank_demo.models.account import SavingsAccount, format_description
from bank_demo.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


class ConsoleSink:
    """Print outcomes to stdout, either as report text or JSON lines."""

    def __init__(self, format: str = "text", currency_symbol: str = "$") -> None:
        """Initialize console sink.

        Parameters
        ----------
        format : str
            ``"text"`` for the human-readable report, ``"json"`` for one JSON
            object per outcome.
        currency_symbol : str
            Prefix used for amounts in text mode.
        """
        self.format = format
        self.currency_symbol = currency_symbol
        self._counts: dict[str, int] = {}

    def write(self, outcomes: Iterable[Outcome]) -> None:
        """Write a sequence of outcomes."""
        for outcome in outcomes:
            if self.format == "json":
                data = to_dict(outcome)
                data["ok"] = outcome.ok
                print(json.dumps(data, ensure_ascii=False))
            else:
                for line in self.render(outcome):
                    print(line)
            self._counts[outcome.kind.value] = self._counts.get(outcome.kind.value, 0) + 1

    def render(self, outcome: Outcome) -> list[str]:
        """Render one outcome as the report lines it produces."""
        kind = outcome.kind
        if kind is OutcomeKind.ACCOUNT_CREATED:
            return [f"New account created for {outcome.holder}"]
        if kind is OutcomeKind.ACCOUNT_NOT_FOUND:
            return ["Account not found."]
        if kind is OutcomeKind.DEPOSIT_REJECTED:
            return ["Deposit amount must be positive."]
        if kind is OutcomeKind.DEPOSITED:
            return [f"Deposited {self._money(outcome.amount)} successfully."]
        if kind is OutcomeKind.WITHDRAWN:
            lines = [f"Withdrawn {self._money(outcome.amount)} successfully."]
            if outcome.overdraft:
                lines.insert(0, f"Overdraft! Fee of {self._whole(outcome.fee)} charged.")
            return lines
        if kind is OutcomeKind.WITHDRAWAL_LIMIT_REACHED:
            return [f"Withdrawal limit reached ({SavingsAccount.MAX_WITHDRAWALS} per month)."]
        if kind is OutcomeKind.MINIMUM_BALANCE_BREACHED:
            return [
                "Cannot withdraw — must maintain minimum balance of "
                f"{self._whole(SavingsAccount.MIN_BALANCE)}."
            ]
        if kind is OutcomeKind.INSUFFICIENT_BALANCE:
            return ["Insufficient balance."]
        if kind is OutcomeKind.INTEREST_ADDED:
            label = "Premium interest" if outcome.account_kind is AccountKind.PREMIUM else "Interest"
            return [f"{label} of {self._money(outcome.amount)} added."]
        if kind is OutcomeKind.INSUFFICIENT_FUNDS:
            return ["Insufficient funds to transfer."]
        if kind is OutcomeKind.TRANSFERRED:
            return [f"Transferred {self._money(outcome.amount)} successfully."]
        if kind is OutcomeKind.REPORT_STARTED:
            return ["", " --- All Accounts Report ---"]
        if kind is OutcomeKind.ACCOUNT_SUMMARY:
            return format_description(
                outcome.account_id, outcome.holder, outcome.balance, self.currency_symbol
            ).splitlines()
        raise ValueError(f"Unhandled outcome kind: {kind!r}")

    def close(self) -> dict[str, int]:
        """Log a summary of written outcomes and return the counts."""
        for kind, count in self._counts.items():
            logger.debug("Console sink wrote %d %s outcome(s)", count, kind)
        return dict(self._counts)

    def _money(self, value: Decimal | None) -> str:
        return f"{self.currency_symbol}{value:.2f}"

    def _whole(self, value: Decimal | None) -> str:
        return f"{self.currency_symbol}{value:.0f}"
