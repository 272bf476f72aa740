from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional


def now_local() -> datetime:
    """Current time, aware, in the process's local UTC offset.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now().astimezone()


def now_iso(now: Optional[datetime] = None) -> str:
    """ISO-8601 timestamp with millisecond precision and UTC offset."""
    return (now or now_local()).isoformat(timespec="milliseconds")


def parse_iso_timestamp(value: str) -> datetime:
    # fromisoformat only accepts a trailing "Z" from 3.11 on.
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def date_part(timestamp: str) -> str:
    """Calendar date portion (YYYY-MM-DD) of an ISO timestamp."""
    return timestamp.split("T")[0]


def today_iso(now: Optional[datetime] = None) -> str:
    return (now or now_local()).date().isoformat()


def days_ago_iso(days: int, now: Optional[datetime] = None) -> str:
    today: date = (now or now_local()).date()
    return (today - timedelta(days=int(days))).isoformat()


def hours_diff(start: str, end: str) -> str:
    """Elapsed hours between two ISO timestamps, formatted to 2 decimals.

    No guard: the result is negative when ``end`` precedes ``start``.
    """
    delta = parse_iso_timestamp(end) - parse_iso_timestamp(start)
    return f"{delta.total_seconds() / 3600:.2f}"


def format_time(timestamp: Optional[str]) -> str:
    """Short local clock time, e.g. ``"09:05 AM"``; empty for missing input."""
    if not timestamp:
        return ""
    moment = parse_iso_timestamp(timestamp)
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.strftime("%I:%M %p")
