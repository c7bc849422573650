from __future__ import annotations

import json
import threading

import pytest

from src.classroom_attendance.classroom_attendance.attendance.kv_attendance_repository import KVAttendanceRepository
from src.classroom_attendance.classroom_attendance.attendance.model import AttendanceEntry
from src.classroom_attendance.classroom_attendance.attendance.service import AttendanceService
from src.classroom_attendance.classroom_attendance.common.ids import TimestampIdGenerator
from src.classroom_attendance.classroom_attendance.core.exceptions import ValidationError
from src.classroom_attendance.classroom_attendance.students.kv_student_repository import KVStudentRepository
from src.classroom_attendance.classroom_attendance.students.service import StudentService


@pytest.fixture
def roster(storage, sequential_ids):
    svc = StudentService(KVStudentRepository(storage), id_generator=sequential_ids)
    return [
        svc.add_student(name="An", roll_number="01", class_name="5A"),
        svc.add_student(name="Binh", roll_number="02", class_name="5A"),
    ]


def _service(storage, **kwargs):
    return AttendanceService(
        KVAttendanceRepository(storage),
        KVStudentRepository(storage),
        id_generator=TimestampIdGenerator(),
        **kwargs,
    )


def test_unknown_student_rejected_when_refs_enforced(storage, roster):
    svc = _service(storage, enforce_student_refs=True)

    with pytest.raises(ValidationError, match="ghost"):
        svc.record(date="2024-01-10", class_name="5A", entries=[{"studentId": "ghost", "present": True}])
    assert svc.query() == []

    record = svc.record(
        date="2024-01-10",
        class_name="5A",
        entries=[AttendanceEntry(student_id=s.student_id, present=True) for s in roster],
    )
    assert len(record.entries) == 2


def test_duplicate_submission_rejected_when_disabled(storage, roster):
    svc = _service(storage, allow_duplicate_submission=False)
    entries = [{"studentId": roster[0].student_id, "present": True}]

    svc.record(date="2024-01-10", class_name="5A", entries=entries)
    with pytest.raises(ValidationError):
        svc.record(date="2024-01-10", class_name="5A", entries=entries)

    # Another day or another class is still fine
    svc.record(date="2024-01-11", class_name="5A", entries=entries)
    svc.record(date="2024-01-10", class_name="5B", entries=entries)
    assert len(svc.query()) == 3


def test_entry_without_student_id_is_rejected(storage):
    svc = _service(storage)

    with pytest.raises(ValidationError):
        svc.record(date="2024-01-10", class_name="5A", entries=[{"present": True}])


def test_entries_keep_order(storage, roster):
    svc = _service(storage)
    record = svc.record(
        date="2024-01-10",
        class_name="5A",
        entries=[
            {"studentId": roster[1].student_id, "present": False},
            {"studentId": roster[0].student_id, "present": True},
        ],
    )

    stored = svc.query(date="2024-01-10")[0]
    assert stored == record
    assert [e.student_id for e in stored.entries] == [roster[1].student_id, roster[0].student_id]


def test_report_rows_join_roster_and_flag_unknown(storage, roster):
    svc = _service(storage)
    svc.record(
        date="2024-01-10",
        class_name="5A",
        entries=[
            {"studentId": roster[0].student_id, "present": True},
            {"studentId": "removed", "present": False},
        ],
    )

    rows = svc.report_rows(class_name="all")

    assert [(r.roll_number, r.student_name, r.status_label) for r in rows] == [
        ("01", "An", "Present"),
        ("N/A", "Unknown Student", "Absent"),
    ]


def test_reads_records_saved_with_students_key(storage):
    storage.set_item(
        "attendance",
        json.dumps([{"_id": "1", "date": "2024-01-10", "class": "5A", "students": [{"studentId": "s1", "present": True}]}]),
    )

    records = _service(storage).query(date="2024-01-10", class_name="5A")

    assert records[0].attendance_id == "1"
    assert records[0].entries == (AttendanceEntry(student_id="s1", present=True),)


def test_concurrent_submissions_never_lose_an_append(storage):
    svc = _service(storage)
    entries = [{"studentId": "s1", "present": True}]

    threads = [
        threading.Thread(target=svc.record, kwargs={"date": "2024-01-10", "class_name": "5A", "entries": entries})
        for _ in range(20)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    records = svc.query()
    assert len(records) == 20
    assert len({r.attendance_id for r in records}) == 20


@pytest.mark.parametrize(
    "raw, expected",
    [(True, True), (False, False), ("true", True), ("false", False), ("on", True), ("0", False), ("", False), (1, True), (None, False)],
)
def test_present_flag_parsing(storage, raw, expected):
    record = _service(storage).record(
        date="2024-01-10", class_name="5A", entries=[{"studentId": "s1", "present": raw}]
    )

    assert record.entries[0].present is expected


def test_present_flag_rejects_unknown_text(storage):
    svc = _service(storage)

    with pytest.raises(ValidationError):
        svc.record(date="2024-01-10", class_name="5A", entries=[{"studentId": "s1", "present": "maybe"}])
    assert svc.query() == []
