from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..core.exceptions import StorageError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(handle: DatabaseConnection) -> Iterator[Tuple[sqlite3.Connection, sqlite3.Cursor]]:
    with handle.lock:
        conn = handle.connect()
        cur = conn.cursor()
        try:
            yield conn, cur
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StorageError(str(e)) from e
        finally:
            cur.close()


def fetchone(cur: sqlite3.Cursor) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return dict(row) if row else None


def fetchall(cur: sqlite3.Cursor) -> List[Dict[str, Any]]:
    return [dict(r) for r in cur.fetchall() or []]
