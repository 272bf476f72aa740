from __future__ import annotations

from enum import Enum


class Intent(str, Enum):
    """Chat commands understood by the Messenger webhook."""

    TIME_IN = "time in"
    TIME_OUT = "time out"
    TODAY = "today"
    WEEK = "week"
    UNKNOWN = "unknown"
