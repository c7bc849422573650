from __future__ import annotations

from src.classroom_attendance.classroom_attendance.students.kv_student_repository import KVStudentRepository
from src.classroom_attendance.classroom_attendance.students.service import StudentService


def test_add_student_strips_and_persists(storage, sequential_ids):
    svc = StudentService(KVStudentRepository(storage), id_generator=sequential_ids)

    student = svc.add_student(name=" An ", roll_number=" 01", class_name="5A ")

    assert (student.student_id, student.name, student.roll_number, student.class_name) == ("id1", "An", "01", "5A")
    assert svc.list_students() == [student]


def test_each_add_grows_roster_by_one(storage, sequential_ids):
    svc = StudentService(KVStudentRepository(storage), id_generator=sequential_ids)

    for i in range(3):
        svc.add_student(name=f"S{i}", roll_number=str(i), class_name="5A")
        assert len(svc.list_students()) == i + 1

    assert len({s.student_id for s in svc.list_students()}) == 3


def test_classes_and_filter(storage, sequential_ids):
    svc = StudentService(KVStudentRepository(storage), id_generator=sequential_ids)
    svc.add_student(name="An", roll_number="01", class_name="5B")
    svc.add_student(name="Binh", roll_number="02", class_name="5A")
    svc.add_student(name="Chi", roll_number="03", class_name="5b")

    assert svc.list_classes() == {"5A", "5B", "5b"}
    assert [s.name for s in svc.list_by_class("5B")] == ["An"]


def test_get_by_id(storage, sequential_ids):
    repo = KVStudentRepository(storage)
    svc = StudentService(repo, id_generator=sequential_ids)
    student = svc.add_student(name="An", roll_number="01", class_name="5A")

    assert repo.get_by_id(student.student_id) == student
    assert repo.get_by_id("missing") is None
