"""Turn a raw ledger document into domain objects."""
from __future__ import annotations

import re
from datetime import datetime
from typing import List, Pattern, Tuple

from timeledger.document import LedgerDocument, LedgerParseError
from timeledger.models import Day, Task
from timeledger.time_utils import parse_instant

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}")


def build_days(document: LedgerDocument) -> Tuple[Day, ...]:
    """Flatten day blocks into Days, keeping block then date order."""

    days: List[Day] = []
    for block in document.timeledger:
        for date_text, raw_tasks in block.items():
            day_start = _parse(_DATE_PATTERN, date_text, f"{date_text}T00:00:00Z", f"date '{date_text}'")
            tasks = tuple(_build_task(date_text, raw_task) for raw_task in raw_tasks)
            days.append(Day(date=day_start, tasks=tasks))
    return tuple(days)


def _build_task(date_text: str, raw_task: List[str]) -> Task:
    start_text, end_text, description, *tags = raw_task
    return Task(
        start=_parse_time(date_text, start_text, "start"),
        end=_parse_time(date_text, end_text, "end"),
        description=description,
        tags=tuple(tags),
    )


def _parse_time(date_text: str, time_text: str, which: str) -> datetime:
    return _parse(
        _TIME_PATTERN,
        time_text,
        f"{date_text}T{time_text}:00Z",
        f"{which} time '{time_text}' on {date_text}",
    )


def _parse(pattern: Pattern[str], field_text: str, value: str, what: str) -> datetime:
    """Parse ``value`` once ``field_text`` has the exact zero-padded shape."""

    if pattern.fullmatch(field_text) is None:
        raise LedgerParseError(f"Cannot parse {what}")
    try:
        return parse_instant(value)
    except ValueError as exc:
        raise LedgerParseError(f"Cannot parse {what}") from exc


__all__ = ["build_days"]
