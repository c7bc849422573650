from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Domain entity: one student of the roster.

    `class_name` is stored under the JSON key `class`.
    """

    student_id: str
    name: str
    roll_number: str
    class_name: str
