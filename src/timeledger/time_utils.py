"""Helpers for dealing with UTC instants and hour formatting."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal

INSTANT_FORMAT = "%Y-%m-%d %H:%M:%S UTC"
_SOURCE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
_HUNDREDTHS = Decimal("0.01")


def parse_instant(value: str) -> datetime:
    """Parse ``YYYY-MM-DDTHH:MM:SSZ`` into an aware UTC datetime."""

    return datetime.strptime(value, _SOURCE_FORMAT).replace(tzinfo=timezone.utc)


def format_instant(value: datetime) -> str:
    """Return the canonical text form, e.g. ``2019-08-05 09:30:00 UTC``."""

    return value.astimezone(timezone.utc).strftime(INSTANT_FORMAT)


def week_start(value: datetime) -> datetime:
    """Return the Monday of the ISO week containing ``value``."""

    return value - timedelta(days=value.isoweekday() - 1)


def whole_minutes(duration: timedelta) -> int:
    """Number of whole minutes in ``duration``, truncated toward zero."""

    return int(duration / timedelta(minutes=1))


def format_hours(minutes: int) -> str:
    """Render minutes as hours rounded half away from zero to two places.

    Trailing zeros are dropped: 125 -> ``2.08``, 90 -> ``1.5``, 120 -> ``2``.
    """

    hours = (Decimal(minutes) / Decimal(60)).quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP)
    return f"{hours.normalize():f}"


__all__ = [
    "INSTANT_FORMAT",
    "format_hours",
    "format_instant",
    "parse_instant",
    "week_start",
    "whole_minutes",
]
