"""Output sinks for rendering outcomes."""

from bank_demo.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
