from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def add(self, record: AttendanceRecord, *, reject_duplicate: bool = False) -> AttendanceRecord:
        """Append a record.

        With `reject_duplicate`, raises ValidationError when a record for the same
        (date, class) already exists; the check and the append are one critical section.
        """

        raise NotImplementedError
