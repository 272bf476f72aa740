from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class Record:
    """Domain entity: one attendance entry (open until time_out is set)."""

    id: int
    name: str
    time_in: str
    time_out: Optional[str]
    hours: Optional[float]
    date: str

    @property
    def is_open(self) -> bool:
        return self.time_out is None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ClockOutResult:
    time_out: str
    hours: str
