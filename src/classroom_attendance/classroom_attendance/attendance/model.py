from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class AttendanceEntry:
    student_id: str
    present: bool


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one submission covering a class on a given date."""

    attendance_id: str
    date: str
    class_name: str
    entries: Tuple[AttendanceEntry, ...]


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for the report table (one row per student entry)."""

    attendance_id: str
    date: str
    class_name: str
    student_id: str
    roll_number: str
    student_name: str
    present: bool

    @property
    def status_label(self) -> str:
        return "Present" if self.present else "Absent"
