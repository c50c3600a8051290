"""Domain model of a validated time ledger."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Tuple

from timeledger.time_utils import format_instant


@dataclass(frozen=True, slots=True, order=True)
class Task:
    """A single time-stamped task. Compared by ``(start, end)`` only."""

    start: datetime
    end: datetime
    description: str = field(compare=False)
    tags: Tuple[str, ...] = field(default=(), compare=False)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def display(self) -> str:
        return f"{format_instant(self.start)} - {format_instant(self.end)}: {self.description}"


@dataclass(frozen=True, slots=True, order=True)
class Day:
    """A calendar day at UTC midnight with tasks in source order."""

    date: datetime
    tasks: Tuple[Task, ...] = field(default=(), compare=False)

    @property
    def total_duration(self) -> timedelta:
        return sum((task.duration for task in self.tasks), timedelta())


__all__ = ["Task", "Day"]
