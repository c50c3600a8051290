"""Utilities for turning aggregated totals into text tables."""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, Tuple

from timeledger.time_utils import format_hours, whole_minutes

DAY_TITLE = "Hours per Day"
WEEK_TITLE = "Hours per Week"
TAG_TITLE = "Hours per Tag"


def render_report(title: str, rows: Iterable[Tuple[datetime | str, timedelta]]) -> str:
    """Render ``rows`` as ``<key>: <hours>hrs`` lines inside a banner."""

    rule = f"# {'-' * len(title)} #"
    lines = [rule, f"# {title} #", rule]
    for key, total in rows:
        label = key.strftime("%Y-%m-%d") if isinstance(key, datetime) else key
        lines.append(f"{label}: {format_hours(whole_minutes(total))}hrs")
    lines.append(rule)
    return "\n".join(lines) + "\n"


__all__ = ["DAY_TITLE", "TAG_TITLE", "WEEK_TITLE", "render_report"]
