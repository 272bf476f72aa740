from __future__ import annotations

import logging

from timekeeping.config import get_settings_module, load_settings
from timekeeping.database.bootstrap import apply_schema, list_tables
from timekeeping.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    settings = load_settings(get_settings_module())

    handle = DatabaseConnection(DBConfig(path=settings.DB_PATH))
    try:
        apply_schema(handle)
        tables = list_tables(handle)
    finally:
        handle.close()
    print(f"OK: Applied schema.sql -> {settings.DB_PATH} (tables={len(tables)})")


if __name__ == "__main__":
    main()
