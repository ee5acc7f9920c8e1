"""Bank: in-memory registry of accounts with lookup and transfer."""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator

from bank_demo.models import (
    Account,
    InterestBearing,
    Outcome,
    OutcomeKind,
    TransferResult,
    to_amount,
)

logger = logging.getLogger(__name__)


@dataclass
class Bank:
    """Ordered registry of accounts.

    Account ids are not checked for uniqueness; lookups return the first
    registered match. Every bank-level outcome is also kept in ``journal``.
    """

    accounts: list[Account] = field(default_factory=list)
    journal: list[Outcome] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self.accounts)

    def _record(self, outcome: Outcome) -> Outcome:
        self.journal.append(outcome)
        return outcome

    def create_account(self, account: Account) -> Outcome:
        """Register an account."""
        self.accounts.append(account)
        logger.debug("Registered %r", account)
        return self._record(
            Outcome(
                kind=OutcomeKind.ACCOUNT_CREATED,
                account_id=account.account_id,
                account_kind=account.kind,
                holder=account.holder_name,
                balance=account.balance,
            )
        )

    def find_account(self, account_id: str) -> Account | None:
        """Return the first account with ``account_id``.

        A miss is not silent: it is logged and journaled as
        ``ACCOUNT_NOT_FOUND`` before ``None`` is returned.
        """
        for account in self.accounts:
            if account.account_id == account_id:
                return account
        logger.warning("Account %s not found", account_id)
        self._record(Outcome(kind=OutcomeKind.ACCOUNT_NOT_FOUND, account_id=account_id))
        return None

    def transfer(self, from_id: str, to_id: str, amount: Any) -> TransferResult:
        """Move ``amount`` from one account to another.

        The only guard is the source balance before withdrawal. Once that
        passes the transfer is reported as done, whatever the source's own
        withdrawal rules decided; check ``TransferResult.settled``.
        """
        amount = to_amount(amount)
        result = TransferResult(from_id=from_id, to_id=to_id, amount=amount)
        mark = len(self.journal)

        source = self.find_account(from_id)
        target = self.find_account(to_id)
        if source is None or target is None:
            result.outcomes.extend(self.journal[mark:])
            return result

        if source.balance < amount:
            logger.info("Transfer %s -> %s of %s refused: insufficient funds", from_id, to_id, amount)
            result.outcomes.append(
                self._record(
                    Outcome(
                        kind=OutcomeKind.INSUFFICIENT_FUNDS,
                        account_id=from_id,
                        account_kind=source.kind,
                        holder=source.holder_name,
                        amount=amount,
                        balance=source.balance,
                    )
                )
            )
            return result

        withdrawal = self._record(source.withdraw(amount))
        deposit = self._record(target.deposit(amount))
        if not withdrawal.ok:
            logger.warning(
                "Transfer %s -> %s reported although withdrawal was declined (%s)",
                from_id,
                to_id,
                withdrawal.kind.value,
            )
        result.outcomes.extend(
            [
                withdrawal,
                deposit,
                self._record(
                    Outcome(
                        kind=OutcomeKind.TRANSFERRED,
                        account_id=from_id,
                        account_kind=source.kind,
                        holder=source.holder_name,
                        amount=amount,
                        balance=source.balance,
                    )
                ),
            ]
        )
        return result

    def show_all_accounts(self) -> list[Outcome]:
        """Summarise every account in registration order.

        Interest-bearing accounts are credited one round of interest right
        after their summary, so the summary shows the pre-interest balance.
        """
        outcomes = [self._record(Outcome(kind=OutcomeKind.REPORT_STARTED))]
        for account in self.accounts:
            outcomes.append(
                self._record(
                    Outcome(
                        kind=OutcomeKind.ACCOUNT_SUMMARY,
                        account_id=account.account_id,
                        account_kind=account.kind,
                        holder=account.holder_name,
                        balance=account.balance,
                    )
                )
            )
            if isinstance(account, InterestBearing):
                outcomes.append(self._record(account.calculate_interest()))
        return outcomes
