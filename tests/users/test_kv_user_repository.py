from __future__ import annotations

import json

import pytest

from src.classroom_attendance.classroom_attendance.core.exceptions import DuplicateEmailError
from src.classroom_attendance.classroom_attendance.users.kv_user_repository import KVSessionRepository, KVUserRepository
from src.classroom_attendance.classroom_attendance.users.model import SessionUser, User


def test_reads_legacy_underscore_id(storage):
    storage.set_item("users", json.dumps([{"_id": "1700000000000", "name": "A", "email": "a@x.com", "password": "pw"}]))

    user = KVUserRepository(storage).get_by_email("a@x.com")

    assert user == User(user_id="1700000000000", name="A", email="a@x.com", password="pw")


def test_add_rejects_duplicate_email(storage):
    repo = KVUserRepository(storage)
    repo.add(User(user_id="1", name="A", email="a@x.com", password="pw"))

    with pytest.raises(DuplicateEmailError):
        repo.add(User(user_id="2", name="B", email="a@x.com", password="pw"))
    assert [u.user_id for u in repo.list_all()] == ["1"]


def test_session_round_trip(storage):
    repo = KVSessionRepository(storage)
    assert repo.get_current() is None

    repo.set_current(SessionUser(user_id="1", name="A", email="a@x.com"))
    assert repo.get_current() == SessionUser(user_id="1", name="A", email="a@x.com")

    repo.clear()
    assert repo.get_current() is None
    repo.clear()
