"""Account generator for demo and test populations."""

from decimal import Decimal
from typing import Iterator

from bank_demo.generators.base import BaseGenerator
from bank_demo.models import ACCOUNT_CLASSES, Account, AccountKind


class AccountGenerator(BaseGenerator):
    """Generate random accounts of every variant.

    Opening balances are drawn per variant so that freshly generated
    accounts satisfy their own withdrawal rules (savings above the reserve,
    premium above its tier threshold).
    """

    ACCOUNT_KINDS = list(AccountKind)
    ACCOUNT_KIND_WEIGHTS = [0.45, 0.40, 0.15]

    OPENING_BALANCE_RANGES = {
        AccountKind.SAVINGS: (500, 5000),
        AccountKind.CHECKING: (0, 2500),
        AccountKind.PREMIUM: (10000, 50000),
    }

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        first_id: int = 2001,
    ) -> None:
        super().__init__(seed, locale=locale)
        self._next_id = first_id

    def generate(self, kind: AccountKind | None = None) -> Account:
        """Generate a single account.

        Parameters
        ----------
        kind : AccountKind | None
            Variant to build; drawn by weight when omitted.

        Returns
        -------
        Account
            Generated account with a sequential numeric id.
        """
        if kind is None:
            kind = self.random.choices(self.ACCOUNT_KINDS, weights=self.ACCOUNT_KIND_WEIGHTS, k=1)[0]

        account_id = str(self._next_id)
        self._next_id += 1

        low, high = self.OPENING_BALANCE_RANGES[kind]
        balance = Decimal(str(round(self.random.uniform(low, high), 2)))

        return ACCOUNT_CLASSES[kind](account_id, self.fake.first_name(), balance)

    def generate_batch(self, count: int, kind: AccountKind | None = None) -> Iterator[Account]:
        """Generate ``count`` accounts."""
        for _ in range(count):
            yield self.generate(kind)

    def amount(self, low: float = 1, high: float = 1000) -> Decimal:
        """Draw a positive two-decimal amount."""
        return Decimal(str(round(self.random.uniform(low, high), 2)))
