from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.classroom_attendance.classroom_attendance.core.exceptions import (
    AuthenticationError,
    DuplicateEmailError,
    InvalidPasswordError,
    UserNotFoundError,
    ValidationError,
)
from src.classroom_attendance.classroom_attendance.users.model import SessionUser, User
from src.classroom_attendance.classroom_attendance.users.service import AuthService, is_password_hash, verify_password


@dataclass
class InMemoryUsers:
    users: list[User] = field(default_factory=list)

    def list_all(self):
        return list(self.users)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users if u.email == email), None)

    def add(self, user: User) -> User:
        self.users.append(user)
        return user


@dataclass
class InMemorySession:
    current: Optional[SessionUser] = None

    def get_current(self):
        return self.current

    def set_current(self, user: SessionUser) -> None:
        self.current = user

    def clear(self) -> None:
        self.current = None


def _service(users=None, *, hash_passwords=True):
    return AuthService(
        users or InMemoryUsers(),
        InMemorySession(),
        id_generator=lambda: "u-new",
        hash_passwords=hash_passwords,
    )


def test_register_stores_hashed_password():
    users = InMemoryUsers()
    auth = _service(users)

    user = auth.register(name=" Lan ", email="lan@x.com", password="secret")

    assert user.user_id == "u-new"
    assert user.name == "Lan"
    assert user.password != "secret"
    assert is_password_hash(user.password)
    assert auth.authenticate("lan@x.com", "secret") == user


def test_register_plain_text_when_hashing_disabled():
    auth = _service(hash_passwords=False)

    user = auth.register(name="Lan", email="lan@x.com", password="secret")

    assert user.password == "secret"


def test_register_requires_fields():
    auth = _service()

    with pytest.raises(ValidationError):
        auth.register(name="", email="lan@x.com", password="secret")
    with pytest.raises(ValidationError):
        auth.register(name="Lan", email="  ", password="secret")
    with pytest.raises(ValidationError):
        auth.register(name="Lan", email="lan@x.com", password="")


def test_register_duplicate_email():
    users = InMemoryUsers([User(user_id="u1", name="A", email="a@x.com", password="pw")])
    auth = _service(users)

    with pytest.raises(DuplicateEmailError):
        auth.register(name="B", email="a@x.com", password="other")
    assert len(users.users) == 1


def test_authenticate_errors_are_typed():
    users = InMemoryUsers([User(user_id="u1", name="A", email="a@x.com", password=generate_password_hash("right"))])
    auth = _service(users)

    with pytest.raises(InvalidPasswordError):
        auth.authenticate("a@x.com", "wrong")
    with pytest.raises(UserNotFoundError):
        auth.authenticate("missing@x.com", "right")

    # Both failures are login failures for the controller
    assert issubclass(InvalidPasswordError, AuthenticationError)
    assert issubclass(UserNotFoundError, AuthenticationError)


def test_login_sets_session_without_password():
    users = InMemoryUsers([User(user_id="u1", name="A", email="a@x.com", password="pw")])
    auth = _service(users)

    s_user = auth.login("a@x.com", "pw")

    assert s_user == SessionUser(user_id="u1", name="A", email="a@x.com")
    assert auth.current_user() == s_user
    auth.logout()
    assert auth.current_user() is None


def test_failed_login_leaves_session_empty():
    users = InMemoryUsers([User(user_id="u1", name="A", email="a@x.com", password="pw")])
    auth = _service(users)

    with pytest.raises(InvalidPasswordError):
        auth.login("a@x.com", "PW")
    assert auth.current_user() is None


def test_verify_password_legacy_and_hashed():
    assert verify_password("pw", "pw")
    assert not verify_password("pw", "pw ")
    hashed = generate_password_hash("pw")
    assert verify_password(hashed, "pw")
    assert not verify_password(hashed, "nope")
    # A legacy password that happens to contain '$' is still compared as text
    assert verify_password("a$b$c", "a$b$c")


def test_authenticate_strips_email_like_register():
    auth = _service(hash_passwords=False)
    user = auth.register(name="Lan", email=" lan@x.com ", password="secret")

    assert auth.authenticate("lan@x.com  ", "secret") == user


def test_login_writes_to_the_given_session_only():
    users = InMemoryUsers([User(user_id="u1", name="A", email="a@x.com", password="pw")])
    auth = _service(users)
    browser = InMemorySession()

    auth.login("a@x.com", "pw", session=browser)

    assert auth.current_user(session=browser) == SessionUser(user_id="u1", name="A", email="a@x.com")
    assert auth.current_user() is None
    auth.logout(session=browser)
    assert browser.current is None
