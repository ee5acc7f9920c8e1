"""Random account generators."""

from bank_demo.generators.account import AccountGenerator

__all__ = ["AccountGenerator"]
