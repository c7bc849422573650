from __future__ import annotations

from typing import Sequence

from ..core.constants import ATTENDANCE_KEY
from ..core.exceptions import ValidationError
from ..storage.base import KeyValueStorage
from ..storage.json_codec import load_list, save_list
from .model import AttendanceEntry, AttendanceRecord
from .repository import AttendanceRepository


def _from_row(row: dict) -> AttendanceRecord:
    # Older saves used `_id` and `students` for the entry list.
    raw_entries = row.get("entries")
    if raw_entries is None:
        raw_entries = row.get("students") or []
    return AttendanceRecord(
        attendance_id=str(row.get("id") or row.get("_id") or ""),
        date=str(row.get("date") or ""),
        class_name=str(row.get("class") or ""),
        entries=tuple(
            AttendanceEntry(student_id=str(e.get("studentId") or ""), present=bool(e.get("present")))
            for e in raw_entries
            if isinstance(e, dict)
        ),
    )


def _to_row(record: AttendanceRecord) -> dict:
    return {
        "id": record.attendance_id,
        "date": record.date,
        "class": record.class_name,
        "entries": [{"studentId": e.student_id, "present": e.present} for e in record.entries],
    }


class KVAttendanceRepository(AttendanceRepository):
    def __init__(self, storage: KeyValueStorage):
        self._storage = storage

    def list_all(self) -> Sequence[AttendanceRecord]:
        return [_from_row(r) for r in load_list(self._storage, ATTENDANCE_KEY)]

    def add(self, record: AttendanceRecord, *, reject_duplicate: bool = False) -> AttendanceRecord:
        with self._storage.locked():
            rows = load_list(self._storage, ATTENDANCE_KEY)
            if reject_duplicate and any(
                r.get("date") == record.date and r.get("class") == record.class_name for r in rows
            ):
                raise ValidationError(
                    f"Attendance for class {record.class_name} on {record.date} has already been saved"
                )
            rows.append(_to_row(record))
            save_list(self._storage, ATTENDANCE_KEY, rows)
        return record
