from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .messenger.client import MessengerClient
from .messenger.service import MessengerService
from .records.service import RecordService
from .records.sqlite_record_repository import SQLiteRecordRepository
from .reports.service import ExportService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    records_repo: SQLiteRecordRepository
    messenger_client: MessengerClient

    record_service: RecordService
    export_service: ExportService
    messenger_service: MessengerService

    def close(self) -> None:
        self.conn.close()


def build_container(
    *,
    db_path: str,
    page_token: str,
    graph_api_url: str,
    send_timeout: Optional[float] = None,
    messenger_client: Optional[MessengerClient] = None,
) -> Container:
    conn = DatabaseConnection(DBConfig(path=db_path))

    records_repo = SQLiteRecordRepository(conn)
    client = messenger_client or MessengerClient(
        page_token=page_token,
        api_url=graph_api_url,
        timeout=send_timeout,
    )

    return Container(
        conn=conn,
        records_repo=records_repo,
        messenger_client=client,
        record_service=RecordService(records_repo),
        export_service=ExportService(records_repo),
        messenger_service=MessengerService(client),
    )
