from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import format_time
from ..core.constants import EXPORT_HEADER
from ..records.model import Record
from ..records.repository import RecordRepository


def _format_hours(hours: Optional[float]) -> str:
    # Null and 0 both export as blank.
    if not hours:
        return ""
    value = float(hours)
    return str(int(value)) if value.is_integer() else str(value)


class ExportService:
    """Renders every stored record as a CSV document.

    Fields are joined verbatim without quoting, so a name containing a comma
    or newline shifts the columns of its line.
    """

    def __init__(self, records: RecordRepository):
        self._records = records

    def build_csv(self) -> str:
        lines = [",".join(EXPORT_HEADER)]
        for r in self._records.list_all():
            lines.append(self._to_line(r))
        return "\n".join(lines) + "\n"

    def _to_line(self, r: Record) -> str:
        return ",".join(
            [
                str(r.name),
                format_time(r.time_in),
                format_time(r.time_out),
                _format_hours(r.hours),
                str(r.date),
            ]
        )
