from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterator

from ..core.exceptions import ValidationError


def parse_iso_date(value: str, field_name: str = "date") -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip()[:10], "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError("Invalid date (YYYY-MM-DD)", field=field_name)


def parse_year_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM into (year, month)."""
    try:
        parsed = datetime.strptime((value or "").strip(), "%Y-%m")
    except ValueError:
        raise ValidationError("Invalid month (YYYY-MM)", field="yearMonth")
    return parsed.year, parsed.month


def month_range(year_month: str) -> tuple[date, date]:
    year, month = parse_year_month(year_month)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def half_month_range(year_month: str, half: str) -> tuple[date, date]:
    """first = 1st..15th, second = 16th..end of month."""
    start, end = month_range(year_month)
    if half == "first":
        return start, start.replace(day=15)
    if half == "second":
        return start.replace(day=16), end
    raise ValidationError("half must be 'first' or 'second'", field="half")


def half_of(day: date) -> str:
    return "first" if day.day <= 15 else "second"


def iter_dates(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_iso_datetime(value: str, field_name: str = "playedAt") -> datetime:
    """Parse ISO-8601 date or datetime; timezone-aware values keep their wall-clock time."""
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise ValidationError(f"{field_name} is required", field=field_name)
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError("Invalid datetime (ISO-8601)", field=field_name)
    return parsed.replace(tzinfo=None)
