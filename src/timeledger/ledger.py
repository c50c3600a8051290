"""Validated, read-only time ledger with its reports."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Tuple

from timeledger.builder import build_days
from timeledger.document import LedgerError, load_document
from timeledger.logging_utils import LOGGER
from timeledger.models import Day
from timeledger.output import Output
from timeledger.report import DAY_TITLE, TAG_TITLE, WEEK_TITLE, render_report
from timeledger.stats import hours_per_day, hours_per_tag, hours_per_week
from timeledger.validator import validate_days


class LedgerReadError(LedgerError):
    """Raised when the ledger file is missing or unreadable."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot read ledger file '{path}': {reason}")
        self.path = path


class Ledger:
    """Days and tasks of a time log, validated once on construction.

    Validation problems are reported to ``out`` as warnings; they never
    prevent the ledger from being built or reported on.
    """

    def __init__(self, days: Iterable[Day], out: Output):
        self._days: Tuple[Day, ...] = tuple(days)
        result = validate_days(self._days, out)
        self._valid = result.valid
        self._issues = tuple(result.issues)

    @classmethod
    def from_json(cls, out: Output, text: str | bytes) -> "Ledger":
        days = build_days(load_document(text))
        LOGGER.debug("Parsed ledger with %d days", len(days))
        return cls(days, out)

    @classmethod
    def from_file(cls, out: Output, path: str | Path) -> "Ledger":
        ledger_path = Path(path)
        LOGGER.debug("Reading ledger from %s", ledger_path)
        try:
            text = ledger_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise LedgerReadError(ledger_path, str(exc)) from exc
        return cls.from_json(out, text)

    @property
    def days(self) -> Tuple[Day, ...]:
        return self._days

    @property
    def is_valid(self) -> bool:
        return self._valid

    @property
    def issues(self) -> Tuple[str, ...]:
        return self._issues

    def report_hours_per_day(self) -> str:
        return render_report(DAY_TITLE, hours_per_day(self._days))

    def report_hours_per_week(self) -> str:
        return render_report(WEEK_TITLE, hours_per_week(self._days))

    def report_hours_per_tag(self) -> str:
        return render_report(TAG_TITLE, hours_per_tag(self._days))


__all__ = ["Ledger", "LedgerReadError"]
