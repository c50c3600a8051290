"""Logical consistency checks over a sequence of days."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from timeledger.models import Day
from timeledger.output import LogLevel, Output
from timeledger.time_utils import format_instant

SUMMARY_WARNING = "Ledger contains at least one issue, e.g. days or tasks are out of order, or tasks overlap"


@dataclass(slots=True)
class ValidationResult:
    valid: bool = True
    issues: List[str] = field(default_factory=list)


def validate_days(days: Sequence[Day], out: Output) -> ValidationResult:
    """Check day ordering and task overlap, reporting each defect to ``out``.

    Days must strictly increase in the given order. Within a day every task is
    compared only with the tasks listed after it: a later task overlaps when it
    starts at or before the earlier task's end. Tasks are not sorted first.
    """

    result = ValidationResult()

    def _warn(message: str) -> None:
        result.valid = False
        result.issues.append(message)
        out.log(LogLevel.WARN, message)

    for previous, current in zip(days, days[1:]):
        if not previous < current:
            _warn(f"{format_instant(previous.date)} appears before {format_instant(current.date)}")

    for day in days:
        for i, task in enumerate(day.tasks):
            for later in day.tasks[i + 1 :]:
                if later.start <= task.end:
                    _warn(f'Task "{task.display()}" overlaps with task "{later.display()}"')

    if not result.valid:
        out.log(LogLevel.WARN, SUMMARY_WARNING)
    return result


__all__ = ["SUMMARY_WARNING", "ValidationResult", "validate_days"]
