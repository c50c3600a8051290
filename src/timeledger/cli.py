"""Command-line entry point printing the ledger reports."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from timeledger.config import get_settings
from timeledger.document import LedgerError
from timeledger.ledger import Ledger
from timeledger.logging_utils import setup_logger
from timeledger.output import ConsoleOutput, Output

LOG_LEVELS = ("ERROR", "WARN", "WARNING", "INFO", "DEBUG", "TRACE")


def run_cli(ledger_path: Path, out: Output) -> Ledger:
    ledger = Ledger.from_file(out, ledger_path)
    out.write(ledger.report_hours_per_tag())
    out.write(ledger.report_hours_per_day())
    out.write(ledger.report_hours_per_week())
    return ledger


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Report hours per tag, day and week from a time ledger")
    parser.add_argument(
        "-l",
        "--ledger",
        type=Path,
        default=settings.ledger_path,
        required=settings.ledger_path is None,
        help="Path to the JSON ledger file",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level.upper(),
        help="Logging level (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    logger = setup_logger(args.log_level)
    out = ConsoleOutput(logger=logger)
    try:
        run_cli(args.ledger, out)
    except LedgerError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
