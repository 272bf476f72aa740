from __future__ import annotations

import pytest

from timekeeping.core.exceptions import StorageError
from timekeeping.database.bootstrap import apply_schema, list_tables
from timekeeping.database.connection import DBConfig, DatabaseConnection
from timekeeping.records.sqlite_record_repository import SQLiteRecordRepository


@pytest.fixture
def handle(tmp_path):
    h = DatabaseConnection(DBConfig(path=str(tmp_path / "records.db")))
    apply_schema(h)
    yield h
    h.close()


@pytest.fixture
def repo(handle):
    return SQLiteRecordRepository(handle)


def test_schema_is_idempotent(handle):
    apply_schema(handle)
    assert list_tables(handle) == ["records"]


def test_created_record_is_open(repo):
    rid = repo.create_open_record(name="alice", time_in="2026-02-01T08:00:00.000+00:00", date="2026-02-01")

    rec = repo.find_latest_open_record("alice")
    assert rec.id == rid
    assert rec.time_out is None and rec.hours is None
    assert rec.to_dict() == {
        "id": rid,
        "name": "alice",
        "time_in": "2026-02-01T08:00:00.000+00:00",
        "time_out": None,
        "hours": None,
        "date": "2026-02-01",
    }


def test_latest_open_record_has_highest_id(repo):
    repo.create_open_record(name="alice", time_in="2026-02-01T08:00:00.000+00:00", date="2026-02-01")
    second = repo.create_open_record(name="alice", time_in="2026-02-01T07:00:00.000+00:00", date="2026-02-01")

    assert repo.find_latest_open_record("alice").id == second
    assert repo.find_latest_open_record("bob") is None


def test_close_record_only_once(repo):
    rid = repo.create_open_record(name="alice", time_in="2026-02-01T08:00:00.000+00:00", date="2026-02-01")

    assert repo.close_record(record_id=rid, time_out="2026-02-01T09:00:00.000+00:00", hours=1.0) is True
    assert repo.close_record(record_id=rid, time_out="2026-02-01T10:00:00.000+00:00", hours=2.0) is False

    [rec] = repo.list_all()
    assert rec.time_out == "2026-02-01T09:00:00.000+00:00"
    assert rec.hours == 1.0
    assert repo.find_latest_open_record("alice") is None


def test_list_by_name_since_compares_iso_dates(repo):
    for day in ("2026-01-24", "2026-01-25", "2026-02-01"):
        repo.create_open_record(name="alice", time_in=f"{day}T08:00:00.000+00:00", date=day)
    repo.create_open_record(name="bob", time_in="2026-02-01T08:00:00.000+00:00", date="2026-02-01")

    assert [r.date for r in repo.list_by_name_since("alice", "2026-01-25")] == ["2026-01-25", "2026-02-01"]
    assert [r.name for r in repo.list_by_name_and_date("alice", "2026-02-01")] == ["alice"]
    assert len(repo.list_all()) == 4


def test_storage_errors_carry_driver_message(tmp_path):
    h = DatabaseConnection(DBConfig(path=str(tmp_path / "empty.db")))
    try:
        with pytest.raises(StorageError, match="no such table: records"):
            SQLiteRecordRepository(h).list_all()
    finally:
        h.close()
