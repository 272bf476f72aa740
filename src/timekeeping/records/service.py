from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..common.datetime_utils import date_part, days_ago_iso, hours_diff, now_iso, now_local, today_iso
from ..common.validators import require_present
from ..core.constants import WEEK_REPORT_DAYS
from ..core.exceptions import ValidationError
from .model import ClockOutResult, Record
from .repository import RecordRepository

NAME_REQUIRED = "Name required"
NO_ACTIVE_TIME_IN = "No active Time In"


class RecordService:
    def __init__(self, records: RecordRepository):
        self._records = records

    def clock_in(self, name: str, *, now: datetime | None = None) -> str:
        """Open a new record for ``name`` and return its time_in.

        Does not look for an existing open record; repeated clock-ins
        create several open records.
        """
        require_present(name, NAME_REQUIRED)

        time_in = now_iso(now or now_local())
        self._records.create_open_record(name=name, time_in=time_in, date=date_part(time_in))
        return time_in

    def clock_out(self, name: str, *, now: datetime | None = None) -> ClockOutResult:
        require_present(name, NAME_REQUIRED)

        record = self._records.find_latest_open_record(name)
        if not record:
            raise ValidationError(NO_ACTIVE_TIME_IN)

        time_out = now_iso(now or now_local())
        hours = hours_diff(record.time_in, time_out)
        if not self._records.close_record(record_id=record.id, time_out=time_out, hours=float(hours)):
            # Closed by a concurrent request between the lookup and the update.
            raise ValidationError(NO_ACTIVE_TIME_IN)

        return ClockOutResult(time_out=time_out, hours=hours)

    def today_report(self, name: str, *, now: datetime | None = None) -> Sequence[Record]:
        return self._records.list_by_name_and_date(name, today_iso(now))

    def week_report(self, name: str, *, now: datetime | None = None) -> Sequence[Record]:
        return self._records.list_by_name_since(name, days_ago_iso(WEEK_REPORT_DAYS, now))
