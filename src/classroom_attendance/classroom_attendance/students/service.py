from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence, Set

from ..common.ids import TimestampIdGenerator
from ..common.logging_setup import LOGGER_NAME
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(f"{LOGGER_NAME}.students.service")


class StudentService:
    """Use case: maintain the roster."""

    def __init__(self, students: StudentRepository, *, id_generator: Optional[Callable[[], str]] = None):
        self._students = students
        self._next_id = id_generator or TimestampIdGenerator()

    def list_students(self) -> Sequence[Student]:
        return self._students.list_all()

    def add_student(self, *, name: str, roll_number: str, class_name: str) -> Student:
        student = Student(
            student_id=self._next_id(),
            name=(name or "").strip(),
            roll_number=(roll_number or "").strip(),
            class_name=(class_name or "").strip(),
        )
        self._students.add(student)
        logger.info("Added student %s to class %r", student.student_id, student.class_name)
        return student

    def list_classes(self) -> Set[str]:
        return {s.class_name for s in self._students.list_all()}

    def list_by_class(self, class_name: str) -> Sequence[Student]:
        return [s for s in self._students.list_all() if s.class_name == class_name]
