"""The classroom script: three accounts, a handful of operations, a report."""

import logging
from dataclasses import dataclass, field

from bank_demo.generators import AccountGenerator
from bank_demo.models import CheckingAccount, Outcome, PremiumAccount, SavingsAccount
from bank_demo.store import Bank

logger = logging.getLogger(__name__)


@dataclass
class ScenarioResult:
    """Bank state and every outcome produced, in execution order."""

    bank: Bank
    outcomes: list[Outcome] = field(default_factory=list)


class ScriptedScenario:
    """Run the fixed demo sequence.

    1. open Savings 1001 (Alice, 1000), Checking 1002 (Bob, 200) and
       Premium 1003 (Charlie, 15000)
    2. Alice deposits 200, then withdraws 300, 100 and 50
    3. Bob withdraws 250 into overdraft
    4. Charlie withdraws 5000 and earns interest
    5. transfer 100 from 1001 to 1002
    6. report on every account

    Parameters
    ----------
    extra_accounts : int
        Number of randomly generated accounts registered after the three
        scripted ones. They take no part in the operations but show up in
        the final report.
    seed : int | None
        Seed for the extra accounts.
    locale : str
        Faker locale for generated holder names.
    """

    def __init__(
        self,
        extra_accounts: int = 0,
        seed: int | None = None,
        locale: str = "en_US",
    ) -> None:
        self.extra_accounts = extra_accounts
        self.seed = seed
        self.locale = locale

    def run(self) -> ScenarioResult:
        """Execute the script against a fresh bank."""
        bank = Bank()
        result = ScenarioResult(bank=bank)
        out = result.outcomes

        alice = SavingsAccount("1001", "Alice", 1000)
        bob = CheckingAccount("1002", "Bob", 200)
        charlie = PremiumAccount("1003", "Charlie", 15000)

        for account in (alice, bob, charlie):
            out.append(bank.create_account(account))

        if self.extra_accounts:
            generator = AccountGenerator(seed=self.seed, locale=self.locale)
            for account in generator.generate_batch(self.extra_accounts):
                out.append(bank.create_account(account))
            logger.info("Registered %d generated account(s)", self.extra_accounts)

        out.append(alice.deposit(200))
        out.append(alice.withdraw(300))
        out.append(alice.withdraw(100))
        out.append(alice.withdraw(50))

        out.append(bob.withdraw(250))

        out.append(charlie.withdraw(5000))
        out.append(charlie.calculate_interest())

        transfer = bank.transfer("1001", "1002", 100)
        out.extend(transfer.outcomes)
        if not transfer.settled:
            logger.info("Scripted transfer was reported but not settled")

        out.extend(bank.show_all_accounts())
        return result
