from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import STUDENTS_KEY
from ..storage.base import KeyValueStorage
from ..storage.json_codec import load_list, save_list
from .model import Student
from .repository import StudentRepository


def _from_row(row: dict) -> Student:
    return Student(
        student_id=str(row.get("id") or row.get("_id") or ""),
        name=str(row.get("name") or ""),
        roll_number=str(row.get("rollNumber") or ""),
        class_name=str(row.get("class") or ""),
    )


def _to_row(student: Student) -> dict:
    return {
        "id": student.student_id,
        "name": student.name,
        "rollNumber": student.roll_number,
        "class": student.class_name,
    }


class KVStudentRepository(StudentRepository):
    def __init__(self, storage: KeyValueStorage):
        self._storage = storage

    def list_all(self) -> Sequence[Student]:
        return [_from_row(r) for r in load_list(self._storage, STUDENTS_KEY)]

    def get_by_id(self, student_id: str) -> Optional[Student]:
        for student in self.list_all():
            if student.student_id == student_id:
                return student
        return None

    def add(self, student: Student) -> Student:
        with self._storage.locked():
            rows = load_list(self._storage, STUDENTS_KEY)
            rows.append(_to_row(student))
            save_list(self._storage, STUDENTS_KEY, rows)
        return student
