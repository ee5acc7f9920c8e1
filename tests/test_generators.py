"""Tests for the account generator and seeded invariant checks."""

from decimal import Decimal

import pytest

from bank_demo.generators import AccountGenerator
from bank_demo.models import (
    AccountKind,
    CheckingAccount,
    InterestBearing,
    OutcomeKind,
    PremiumAccount,
    SavingsAccount,
)
from bank_demo.store import Bank


class TestAccountGenerator:
    """Tests for AccountGenerator."""

    def test_generate_account(self, seed: int) -> None:
        gen = AccountGenerator(seed=seed)
        account = gen.generate()

        assert account.account_id == "2001"
        assert account.holder_name.strip()
        assert account.kind in list(AccountKind)

    @pytest.mark.parametrize(
        "kind, cls",
        [
            (AccountKind.SAVINGS, SavingsAccount),
            (AccountKind.CHECKING, CheckingAccount),
            (AccountKind.PREMIUM, PremiumAccount),
        ],
    )
    def test_generate_kind(self, seed: int, kind: AccountKind, cls: type) -> None:
        account = AccountGenerator(seed=seed).generate(kind)

        assert isinstance(account, cls)
        low, high = AccountGenerator.OPENING_BALANCE_RANGES[kind]
        assert low <= account.balance <= high

    def test_sequential_ids(self, seed: int) -> None:
        accounts = list(AccountGenerator(seed=seed, first_id=10).generate_batch(3))

        assert [a.account_id for a in accounts] == ["10", "11", "12"]

    def test_seed_reproducible(self, seed: int) -> None:
        first = [a.snapshot() for a in AccountGenerator(seed=seed).generate_batch(5)]
        second = [a.snapshot() for a in AccountGenerator(seed=seed).generate_batch(5)]

        assert first == second

    def test_amount_positive(self, seed: int) -> None:
        gen = AccountGenerator(seed=seed)
        amounts = [gen.amount(1, 50) for _ in range(20)]

        assert all(Decimal("1") <= a <= Decimal("50") for a in amounts)


class TestGeneratedInvariants:
    """Seeded checks of account rules across random populations."""

    @pytest.fixture
    def gen(self, seed: int) -> AccountGenerator:
        return AccountGenerator(seed=seed)

    def test_non_positive_deposit_never_changes_balance(self, gen: AccountGenerator) -> None:
        for account in gen.generate_batch(30):
            before = account.balance
            account.deposit(-gen.amount())
            account.deposit(0)
            assert account.balance == before

    def test_savings_never_breaches_reserve(self, gen: AccountGenerator) -> None:
        for account in gen.generate_batch(20, AccountKind.SAVINGS):
            for _ in range(6):
                outcome = account.withdraw(gen.amount(1, 3000))
                assert account.balance >= SavingsAccount.MIN_BALANCE
                if outcome.kind is OutcomeKind.WITHDRAWAL_LIMIT_REACHED:
                    assert account.withdrawal_count == 3
            assert account.withdrawal_count <= 3

    def test_checking_fee_charged_once_per_overdrawn_call(self, gen: AccountGenerator) -> None:
        for account in gen.generate_batch(20, AccountKind.CHECKING):
            for _ in range(4):
                before = account.balance
                amount = gen.amount(1, 1500)
                outcome = account.withdraw(amount)
                expected = before - amount
                if expected < 0:
                    expected -= CheckingAccount.OVERDRAFT_FEE
                    assert outcome.overdraft
                assert account.balance == expected

    def test_premium_never_negative(self, gen: AccountGenerator) -> None:
        for account in gen.generate_batch(20, AccountKind.PREMIUM):
            for _ in range(5):
                account.withdraw(gen.amount(1000, 30000))
                assert account.balance >= 0

    def test_report_applies_interest_only_to_interest_bearing(self, gen: AccountGenerator) -> None:
        bank = Bank()
        for account in gen.generate_batch(15):
            bank.create_account(account)

        interest_ids = [
            o.account_id for o in bank.show_all_accounts() if o.kind is OutcomeKind.INTEREST_ADDED
        ]

        assert interest_ids == [a.account_id for a in bank if isinstance(a, InterestBearing)]
