"""Display formatting for workout dates, plus local-day boundaries."""
from __future__ import annotations

from datetime import date, datetime, time, timedelta

def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return f"{day}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"

def _coerce(value: date | datetime | str) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        text = value.strip()
        # fromisoformat only learned the Z suffix in 3.11
        if text[-1:] in ("Z", "z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            pass
    raise ValueError("Invalid date provided")

def format_date(value: date | datetime | str) -> str:
    """1st Sep 2025"""
    d = _coerce(value)
    return f"{_ordinal(d.day)} {d:%b %Y}"

def format_date_long(value: date | datetime | str) -> str:
    """Monday, 1st Sep 2025"""
    d = _coerce(value)
    return f"{d:%A}, {format_date(d)}"

def format_time(value: date | datetime | str) -> str:
    """14:30 (24-hour)"""
    return f"{_coerce(value):%H:%M}"

def format_date_time(value: date | datetime | str) -> str:
    """1st Sep 2025, 14:30"""
    d = _coerce(value)
    return f"{format_date(d)}, {format_time(d)}"

def format_date_iso(value: date | datetime | str) -> str:
    """2025-09-01"""
    return f"{_coerce(value):%Y-%m-%d}"

def parse_date_input(value: str) -> datetime:
    """
    Parse a form or query date. Accepts 'YYYY-MM-DD' (local midnight) or a full
    ISO date-time. An offset-aware value is converted to local naive time so it
    compares against the naive timestamp columns.
    """
    parsed = _coerce(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed

def day_bounds(day: date | datetime) -> tuple[datetime, datetime]:
    """Half-open [start, next start) of the local calendar day."""
    if isinstance(day, datetime):
        day = day.date()
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)

def format_duration(minutes: int | None) -> str:
    if not minutes:
        return "N/A"
    hours, mins = divmod(minutes, 60)
    if hours > 0:
        return f"{hours}h {mins}m"
    return f"{mins}m"
