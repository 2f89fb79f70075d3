# src/taskboard/tasks/datetime_combiner.py

"""
Date/time helpers for tasks.

All instants are naive datetimes interpreted as local wall-clock time.
The wire format carries no offset, so nothing here converts between zones
except when a server sends an offset-bearing string anyway.
"""

from __future__ import annotations

from datetime import date, datetime, time

from .errors import ValidationError

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _parse_date(value: str | date) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raw = (value or "").strip()
    if not raw:
        raise ValidationError("Please enter a task and select a date.")
    try:
        return date.fromisoformat(raw)
    except ValueError as e:
        raise ValidationError(f"Invalid date: {raw!r} (expected YYYY-MM-DD).") from e


def _parse_time(value: str | time | None) -> time:
    if value is None:
        return time(0, 0)
    if isinstance(value, time):
        return value.replace(tzinfo=None)
    raw = value.strip()
    if not raw:
        return time(0, 0)
    try:
        return time.fromisoformat(raw).replace(tzinfo=None)
    except ValueError as e:
        raise ValidationError(f"Invalid time: {raw!r} (expected HH:MM).") from e


def combine(date_value: str | date, time_value: str | time | None = None) -> datetime:
    """
    Merge a date and an optional time into one local instant.

    A missing or empty time means start of day, so
    combine("2024-05-01", "") == combine("2024-05-01", "00:00").
    """
    return datetime.combine(_parse_date(date_value), _parse_time(time_value))


def to_local_naive(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return instant
    return instant.astimezone().replace(tzinfo=None)


def parse_wire(value: str) -> datetime:
    """Parse the service's date string ("2024-05-01T09:00", "2024-05-01", ...)."""
    raw = str(value).strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    return to_local_naive(datetime.fromisoformat(raw))


def to_wire(instant: datetime) -> str:
    instant = to_local_naive(instant)
    if instant.second or instant.microsecond:
        return instant.isoformat(timespec="seconds")
    return instant.isoformat(timespec="minutes")


def same_day(a: datetime, b: datetime) -> bool:
    a, b = to_local_naive(a), to_local_naive(b)
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def format_display(instant: datetime) -> str:
    """
    Medium date + short time, e.g. "1 May 2024, 9:00 am".

    Display only: never compare or store the result.
    """
    dt = to_local_naive(instant)
    hour12 = dt.hour % 12 or 12
    suffix = "am" if dt.hour < 12 else "pm"
    return f"{dt.day} {_MONTHS[dt.month - 1]} {dt.year}, {hour12}:{dt.minute:02d} {suffix}"
