from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Record


class RecordRepository(Protocol):
    def create_open_record(self, *, name: str, time_in: str, date: str) -> int:
        raise NotImplementedError

    def find_latest_open_record(self, name: str) -> Optional[Record]:
        """Open record with the highest id for ``name``."""

        raise NotImplementedError

    def close_record(self, *, record_id: int, time_out: str, hours: float) -> bool:
        """Set time_out/hours; False when the record is missing or already closed."""

        raise NotImplementedError

    def list_by_name_and_date(self, name: str, date: str) -> Sequence[Record]:
        raise NotImplementedError

    def list_by_name_since(self, name: str, since_date: str) -> Sequence[Record]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Record]:
        raise NotImplementedError
