"""Command-line driver for the scripted bank demo."""

from __future__ import annotations

import argparse
import logging
import sys

from bank_demo.config import LOG_FORMATS, OUTPUT_FORMATS, BankDemoConfig, OutputConfig
from bank_demo.exceptions import ConfigurationError
from bank_demo.logging import setup_logging
from bank_demo.scenarios import ScriptedScenario
from bank_demo.sinks import ConsoleSink

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments. Unset flags fall back to the environment."""
    parser = argparse.ArgumentParser(
        description="Run the scripted bank account demo and print the report."
    )
    parser.add_argument("--output", choices=OUTPUT_FORMATS, help="Report format (default: text)")
    parser.add_argument("--log-level", help="Log level for diagnostics on stderr (default: WARNING)")
    parser.add_argument("--log-format", choices=LOG_FORMATS, help="Log record format")
    parser.add_argument("--seed", type=int, help="Seed for generated extra accounts")
    parser.add_argument(
        "--extra-accounts",
        type=int,
        help="Register this many random accounts after the scripted ones",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> BankDemoConfig:
    """Overlay command-line flags on the environment configuration."""
    config = BankDemoConfig.from_env()
    return BankDemoConfig(
        output=OutputConfig(
            format=args.output or config.output.format,
            currency_symbol=config.output.currency_symbol,
        ),
        log_level=args.log_level or config.log_level,
        log_format=args.log_format or config.log_format,
        seed=args.seed if args.seed is not None else config.seed,
        extra_accounts=(
            args.extra_accounts if args.extra_accounts is not None else config.extra_accounts
        ),
        locale=config.locale,
    )


def main(argv: list[str] | None = None) -> int:
    """Run the demo. Returns the process exit code."""
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ConfigurationError as exc:
        print(f"bank-demo: {exc}", file=sys.stderr)
        return 2

    setup_logging(level=config.log_level, format_type=config.log_format)
    logger.info("Starting scripted scenario with %d extra account(s)", config.extra_accounts)

    result = ScriptedScenario(
        extra_accounts=config.extra_accounts,
        seed=config.seed,
        locale=config.locale,
    ).run()

    sink = ConsoleSink(format=config.output.format, currency_symbol=config.output.currency_symbol)
    sink.write(result.outcomes)
    sink.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
