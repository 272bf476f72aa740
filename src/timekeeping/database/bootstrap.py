from __future__ import annotations

import logging
from pathlib import Path

from .connection import DatabaseConnection
from .sqlite_base import db_cursor

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"


def apply_schema(handle: DatabaseConnection, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    sql = Path(schema_path).read_text(encoding="utf-8")
    with db_cursor(handle) as (conn, _):
        conn.executescript(sql)
    logger.info("Schema ready (tables=%s)", ", ".join(list_tables(handle)))


def list_tables(handle: DatabaseConnection) -> list[str]:
    with db_cursor(handle) as (_, cur):
        cur.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
        )
        return [row["name"] for row in cur.fetchall()]
