"""In-memory account registry."""

from bank_demo.store.bank import Bank

__all__ = ["Bank"]
