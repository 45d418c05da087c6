"""Date formatting, tolerant parsing and export range helpers."""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

import typer

from gp_cli.core.constants import DATE_RANGE_LABELS, MONTH_ABBREVIATIONS

_MEDIUM_FORMATS = ("%b %d, %Y at %I:%M %p", "%b %d, %Y, %I:%M %p", "%b %d, %Y %I:%M %p")


def format_medium_datetime(value: datetime) -> str:
    """Format like 'Jan 15, 2024 at 9:30 AM'."""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    month = MONTH_ABBREVIATIONS[value.month - 1]
    return f"{month} {value.day}, {value.year} at {hour}:{value.minute:02d} {meridiem}"


def _normalize(value: str) -> str:
    # Newer platform formatters emit narrow/no-break spaces around the time.
    return " ".join(value.split())


def _strptime_parser(*formats: str) -> Callable[[str], Optional[datetime]]:
    def _parse(value: str) -> Optional[datetime]:
        for fmt in formats:
            try:
                return datetime.strptime(value, fmt)
            except ValueError:
                continue
        return None

    return _parse


# First match wins; order matters for strings more than one pattern accepts.
DATE_PARSERS: List[Callable[[str], Optional[datetime]]] = [
    _strptime_parser(*_MEDIUM_FORMATS),
    _strptime_parser("%Y-%m-%d %H:%M:%S"),
    _strptime_parser("%Y-%m-%d"),
    _strptime_parser("%m/%d/%Y"),
    _strptime_parser("%d/%m/%Y"),
    _strptime_parser("%Y/%m/%d"),
]


def parse_flexible_date(value: str) -> Optional[datetime]:
    """Parse a date string with the known formats, returning None on failure."""
    text = _normalize(value)
    if not text:
        return None
    for parser in DATE_PARSERS:
        parsed = parser(text)
        if parsed is not None:
            return parsed
    return None


def to_iso8601(value: datetime) -> str:
    """Render as UTC ISO-8601 with a trailing Z; naive values are local time."""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def same_day(first: datetime, second: datetime) -> bool:
    return first.date() == second.date()


def _shift_months(value: datetime, months: int) -> datetime:
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def validate_date_range(value: Optional[str]) -> Optional[str]:
    """Typer callback that validates an export range key."""
    if value is None:
        return value
    if value not in DATE_RANGE_LABELS:
        choices = "|".join(DATE_RANGE_LABELS)
        raise typer.BadParameter(f"Invalid range '{value}'. Expected one of: {choices}")
    return value


def resolve_range_start(range_key: str, now: Optional[datetime] = None) -> Optional[datetime]:
    """Resolve a range key into its inclusive start, or None for all time."""
    current = now or datetime.now()

    if range_key == "week":
        return current - timedelta(days=7)
    if range_key == "month":
        return current - timedelta(days=30)
    if range_key == "three-months":
        return _shift_months(current, -3)
    if range_key == "six-months":
        return _shift_months(current, -6)
    if range_key == "year":
        return _shift_months(current, -12)
    if range_key == "all":
        return None

    raise ValueError(f"Unknown date range: {range_key}")
