"""Aggregation of task durations per day, week and tag."""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Tuple

from timeledger.models import Day
from timeledger.time_utils import week_start


def hours_per_day(days: Iterable[Day]) -> List[Tuple[datetime, timedelta]]:
    """Total duration of every day, in ledger order. Overlaps count twice."""

    return [(day.date, day.total_duration) for day in days]


def hours_per_week(days: Iterable[Day]) -> List[Tuple[datetime, timedelta]]:
    totals: Dict[datetime, timedelta] = {}
    for day in days:
        key = week_start(day.date)
        totals[key] = totals.get(key, timedelta()) + day.total_duration
    return sorted(totals.items())


def hours_per_tag(days: Iterable[Day]) -> List[Tuple[str, timedelta]]:
    """Each tag receives the full duration of every task carrying it.

    Sorted ascending by total; equal totals keep first-seen order.
    """

    totals: Dict[str, timedelta] = {}
    for day in days:
        for task in day.tasks:
            for tag in task.tags:
                totals[tag] = totals.get(tag, timedelta()) + task.duration
    return sorted(totals.items(), key=lambda item: item[1])


__all__ = ["hours_per_day", "hours_per_week", "hours_per_tag"]
