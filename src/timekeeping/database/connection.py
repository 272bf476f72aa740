from __future__ import annotations

import logging
import sqlite3
import threading
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    path: str


class DatabaseConnection:
    """Process-wide handle around a single SQLite connection.

    Opened once by the container and injected into repositories; ``close()``
    is called at shutdown. Statements from different request threads are
    serialized through ``lock``.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._conn: Optional[sqlite3.Connection] = None
        self.lock = threading.RLock()

    def connect(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = sqlite3.connect(self._config.path, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            logger.info("Database connected (%s)", self._config.path)
        return self._conn

    def close(self) -> None:
        with self.lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
