from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import Record
from .repository import RecordRepository


def _to_record(r: Dict[str, Any]) -> Record:
    return Record(
        id=int(r["id"]),
        name=r["name"],
        time_in=r["time_in"],
        time_out=r.get("time_out"),
        hours=r.get("hours"),
        date=r["date"],
    )


class SQLiteRecordRepository(RecordRepository):
    def __init__(self, handle: DatabaseConnection):
        self._handle = handle

    def create_open_record(self, *, name: str, time_in: str, date: str) -> int:
        with db_cursor(self._handle) as (_, cur):
            cur.execute(
                "INSERT INTO records (name, time_in, date) VALUES (?, ?, ?)",
                (name, time_in, date),
            )
            return int(cur.lastrowid)

    def find_latest_open_record(self, name: str) -> Optional[Record]:
        with db_cursor(self._handle) as (_, cur):
            cur.execute(
                """
                SELECT id, name, time_in, time_out, hours, date
                FROM records
                WHERE name = ? AND time_out IS NULL
                ORDER BY id DESC
                LIMIT 1
                """,
                (name,),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def close_record(self, *, record_id: int, time_out: str, hours: float) -> bool:
        # Claim-and-close: a record already closed by another request is left untouched.
        with db_cursor(self._handle) as (_, cur):
            cur.execute(
                "UPDATE records SET time_out = ?, hours = ? WHERE id = ? AND time_out IS NULL",
                (time_out, hours, int(record_id)),
            )
            return cur.rowcount > 0

    def list_by_name_and_date(self, name: str, date: str) -> Sequence[Record]:
        with db_cursor(self._handle) as (_, cur):
            cur.execute(
                """
                SELECT id, name, time_in, time_out, hours, date
                FROM records
                WHERE name = ? AND date = ?
                ORDER BY id
                """,
                (name, date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_by_name_since(self, name: str, since_date: str) -> Sequence[Record]:
        # ISO dates are zero-padded, so string order is calendar order.
        with db_cursor(self._handle) as (_, cur):
            cur.execute(
                """
                SELECT id, name, time_in, time_out, hours, date
                FROM records
                WHERE name = ? AND date >= ?
                ORDER BY id
                """,
                (name, since_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Record]:
        with db_cursor(self._handle) as (_, cur):
            cur.execute("SELECT id, name, time_in, time_out, hours, date FROM records ORDER BY id")
            return [_to_record(r) for r in fetchall(cur)]
