"""Configuration management for bank-demo."""

import os
from dataclasses import dataclass, field

from bank_demo.exceptions import ConfigurationError

OUTPUT_FORMATS = ("text", "json")
LOG_FORMATS = ("standard", "json")


@dataclass
class OutputConfig:
    """Console output configuration."""

    format: str = "text"
    currency_symbol: str = "$"

    def __post_init__(self) -> None:
        if self.format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unknown output format {self.format!r}, expected one of {OUTPUT_FORMATS}"
            )


@dataclass
class BankDemoConfig:
    """Main configuration for the demo driver."""

    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "WARNING"
    log_format: str = "standard"
    seed: int | None = None
    extra_accounts: int = 0
    locale: str = "en_US"

    def __post_init__(self) -> None:
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {LOG_FORMATS}"
            )
        if self.extra_accounts < 0:
            raise ConfigurationError("extra_accounts must not be negative")

    @classmethod
    def from_env(cls) -> "BankDemoConfig":
        """Create config from environment variables."""
        output = OutputConfig(
            format=os.getenv("BANK_DEMO_OUTPUT", "text").lower(),
            currency_symbol=os.getenv("BANK_DEMO_CURRENCY", "$"),
        )

        return cls(
            output=output,
            log_level=os.getenv("BANK_DEMO_LOG_LEVEL", "WARNING"),
            log_format=os.getenv("BANK_DEMO_LOG_FORMAT", "standard").lower(),
            seed=_int_from_env("BANK_DEMO_SEED"),
            extra_accounts=_int_from_env("BANK_DEMO_EXTRA_ACCOUNTS") or 0,
            locale=os.getenv("BANK_DEMO_LOCALE", "en_US"),
        )


def _int_from_env(name: str) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
