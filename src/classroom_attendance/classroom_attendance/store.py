from __future__ import annotations

import time
from typing import Callable, Iterable, Optional, Sequence, Set

from .attendance.kv_attendance_repository import KVAttendanceRepository
from .attendance.model import AttendanceRecord, AttendanceReportRow
from .attendance.service import AttendanceService, EntryLike
from .common.ids import TimestampIdGenerator
from .core.constants import DEFAULT_LATENCY_MS
from .storage.base import KeyValueStorage
from .storage.memory_storage import InMemoryStorage
from .students.kv_student_repository import KVStudentRepository
from .students.model import Student
from .students.service import StudentService
from .users.kv_user_repository import KVSessionRepository, KVUserRepository
from .users.model import SessionUser, User
from .users.repository import SessionRepository
from .users.service import AuthService


class AttendanceStore:
    """Facade over users, roster, attendance and the session marker.

    This is the single object the UI layer talks to. Every write persists the
    whole updated collection before returning; failures raise a DomainError
    subclass and leave storage untouched.
    """

    def __init__(
        self,
        auth: AuthService,
        students: StudentService,
        attendance: AttendanceService,
        *,
        latency_ms: int = DEFAULT_LATENCY_MS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._auth = auth
        self._students = students
        self._attendance = attendance
        self._latency = max(0, int(latency_ms)) / 1000.0
        self._sleep = sleep

    def _simulate_latency(self) -> None:
        if self._latency:
            self._sleep(self._latency)

    # users

    def list_users(self) -> Sequence[User]:
        self._simulate_latency()
        return self._auth.list_users()

    def add_user(self, user: User) -> User:
        self._simulate_latency()
        return self._auth.add_user(user)

    def register(self, *, name: str, email: str, password: str) -> User:
        self._simulate_latency()
        return self._auth.register(name=name, email=email, password=password)

    def find_user_by_email(self, email: str) -> Optional[User]:
        self._simulate_latency()
        return self._auth.find_by_email(email)

    def authenticate(self, email: str, password: str) -> User:
        self._simulate_latency()
        return self._auth.authenticate(email, password)

    # session (the stored `currentUser` marker unless a per-client repository is given)

    def login(self, email: str, password: str, *, session: Optional[SessionRepository] = None) -> SessionUser:
        self._simulate_latency()
        return self._auth.login(email, password, session=session)

    def logout(self, *, session: Optional[SessionRepository] = None) -> None:
        self._auth.logout(session=session)

    def current_user(self, *, session: Optional[SessionRepository] = None) -> Optional[SessionUser]:
        return self._auth.current_user(session=session)

    # roster

    def list_students(self) -> Sequence[Student]:
        self._simulate_latency()
        return self._students.list_students()

    def add_student(self, name: str, roll_number: str, class_name: str) -> Student:
        self._simulate_latency()
        return self._students.add_student(name=name, roll_number=roll_number, class_name=class_name)

    def list_classes(self) -> Set[str]:
        self._simulate_latency()
        return self._students.list_classes()

    def list_students_by_class(self, class_name: str) -> Sequence[Student]:
        self._simulate_latency()
        return self._students.list_by_class(class_name)

    # attendance

    def record_attendance(self, date: str, class_name: str, entries: Iterable[EntryLike]) -> AttendanceRecord:
        self._simulate_latency()
        return self._attendance.record(date=date, class_name=class_name, entries=entries)

    def query_attendance(
        self, date: Optional[str] = None, class_name: Optional[str] = None
    ) -> Sequence[AttendanceRecord]:
        self._simulate_latency()
        return self._attendance.query(date=date, class_name=class_name)

    def report_rows(self, date: Optional[str] = None, class_name: Optional[str] = None) -> Sequence[AttendanceReportRow]:
        self._simulate_latency()
        return self._attendance.report_rows(date=date, class_name=class_name)


def build_store(
    storage: Optional[KeyValueStorage] = None,
    *,
    latency_ms: int = DEFAULT_LATENCY_MS,
    allow_duplicate_submission: bool = True,
    enforce_student_refs: bool = False,
    hash_passwords: bool = True,
    id_generator: Optional[Callable[[], str]] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> AttendanceStore:
    """Wire repositories and services over `storage` (in-memory when omitted)."""

    storage = storage if storage is not None else InMemoryStorage()
    next_id = id_generator or TimestampIdGenerator()

    students_repo = KVStudentRepository(storage)
    auth = AuthService(
        KVUserRepository(storage),
        KVSessionRepository(storage),
        id_generator=next_id,
        hash_passwords=hash_passwords,
    )
    students = StudentService(students_repo, id_generator=next_id)
    attendance = AttendanceService(
        KVAttendanceRepository(storage),
        students_repo,
        id_generator=next_id,
        allow_duplicate_submission=allow_duplicate_submission,
        enforce_student_refs=enforce_student_refs,
    )
    return AttendanceStore(auth, students, attendance, latency_ms=latency_ms, sleep=sleep)
