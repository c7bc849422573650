from __future__ import annotations

import logging
from typing import Callable, Iterable, Mapping, Optional, Sequence, Union

from ..common.ids import TimestampIdGenerator
from ..common.logging_setup import LOGGER_NAME
from ..core.constants import ALL_CLASSES, UNKNOWN_ROLL_NUMBER, UNKNOWN_STUDENT_NAME
from ..core.exceptions import ValidationError
from ..students.repository import StudentRepository
from .model import AttendanceEntry, AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository

logger = logging.getLogger(f"{LOGGER_NAME}.attendance.service")

EntryLike = Union[AttendanceEntry, Mapping[str, object]]


_TRUE_VALUES = {"true", "1", "on", "yes"}
_FALSE_VALUES = {"false", "0", "off", "no", ""}


def _parse_present(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
    raise ValidationError(f"Invalid value for present: {value!r}")


def _to_entry(value: EntryLike) -> AttendanceEntry:
    if isinstance(value, AttendanceEntry):
        return value
    student_id = value.get("studentId", value.get("student_id"))
    if not student_id:
        raise ValidationError("Each attendance entry needs a student id")
    return AttendanceEntry(student_id=str(student_id), present=_parse_present(value.get("present", False)))


def _class_filter(class_name: Optional[str]) -> Optional[str]:
    if not class_name or class_name == ALL_CLASSES:
        return None
    return class_name


class AttendanceService:
    """Use cases: record attendance for a class, query and report it."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        id_generator: Optional[Callable[[], str]] = None,
        allow_duplicate_submission: bool = True,
        enforce_student_refs: bool = False,
    ):
        self._attendance = attendance
        self._students = students
        self._next_id = id_generator or TimestampIdGenerator()
        self._allow_duplicate = bool(allow_duplicate_submission)
        self._enforce_refs = bool(enforce_student_refs)

    def record(self, *, date: str, class_name: str, entries: Iterable[EntryLike]) -> AttendanceRecord:
        entries = tuple(_to_entry(e) for e in (entries or ()))
        date = (date or "").strip()
        class_name = (class_name or "").strip()
        if not date or not class_name or not entries:
            raise ValidationError("Please select date, class, and mark attendance")

        if self._enforce_refs:
            known = {s.student_id for s in self._students.list_all()}
            unknown = [e.student_id for e in entries if e.student_id not in known]
            if unknown:
                raise ValidationError(f"Unknown student id(s): {', '.join(unknown)}")

        record = AttendanceRecord(
            attendance_id=self._next_id(),
            date=date,
            class_name=class_name,
            entries=entries,
        )
        self._attendance.add(record, reject_duplicate=not self._allow_duplicate)
        logger.info(
            "Saved attendance %s for class %r on %s (%d entries)",
            record.attendance_id,
            class_name,
            date,
            len(entries),
        )
        return record

    def query(self, *, date: Optional[str] = None, class_name: Optional[str] = None) -> Sequence[AttendanceRecord]:
        records = list(self._attendance.list_all())
        if date:
            records = [r for r in records if r.date == date]
        class_name = _class_filter(class_name)
        if class_name is not None:
            records = [r for r in records if r.class_name == class_name]
        return records

    def report_rows(self, *, date: Optional[str] = None, class_name: Optional[str] = None) -> Sequence[AttendanceReportRow]:
        students = {s.student_id: s for s in self._students.list_all()}
        rows: list[AttendanceReportRow] = []
        for record in self.query(date=date, class_name=class_name):
            for entry in record.entries:
                student = students.get(entry.student_id)
                rows.append(
                    AttendanceReportRow(
                        attendance_id=record.attendance_id,
                        date=record.date,
                        class_name=record.class_name,
                        student_id=entry.student_id,
                        roll_number=student.roll_number if student else UNKNOWN_ROLL_NUMBER,
                        student_name=student.name if student else UNKNOWN_STUDENT_NAME,
                        present=entry.present,
                    )
                )
        return rows
