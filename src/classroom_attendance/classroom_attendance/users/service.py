from __future__ import annotations

import hmac
import logging
from typing import Callable, Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.ids import TimestampIdGenerator
from ..common.logging_setup import LOGGER_NAME
from ..common.validators import require_non_empty
from ..core.exceptions import DuplicateEmailError, InvalidPasswordError, UserNotFoundError
from .model import SessionUser, User
from .repository import SessionRepository, UserRepository

logger = logging.getLogger(f"{LOGGER_NAME}.users.service")

_HASH_METHODS = {"scrypt", "pbkdf2"}


def is_password_hash(stored: str) -> bool:
    """True when `stored` looks like a werkzeug `method$salt$hash` string."""
    parts = stored.split("$")
    if len(parts) != 3:
        return False
    return parts[0].split(":", 1)[0] in _HASH_METHODS


def verify_password(stored: str, password: str) -> bool:
    if is_password_hash(stored):
        try:
            return check_password_hash(stored, password)
        except ValueError:
            return False
    # Legacy records kept the password as plain text.
    return hmac.compare_digest(stored.encode("utf-8"), password.encode("utf-8"))


class AuthService:
    """Use cases: register, authenticate, login/logout."""

    def __init__(
        self,
        users: UserRepository,
        session: SessionRepository,
        *,
        id_generator: Optional[Callable[[], str]] = None,
        hash_passwords: bool = True,
    ):
        self._users = users
        self._session = session
        self._next_id = id_generator or TimestampIdGenerator()
        self._hash_passwords = bool(hash_passwords)

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()

    def find_by_email(self, email: str) -> Optional[User]:
        return self._users.get_by_email(email)

    def add_user(self, user: User) -> User:
        if self._users.get_by_email(user.email):
            raise DuplicateEmailError("A user with this email already exists")
        self._users.add(user)
        logger.info("Registered user %s", user.user_id)
        return user

    def register(self, *, name: str, email: str, password: str) -> User:
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email")
        require_non_empty(password, "Password")

        stored = generate_password_hash(password) if self._hash_passwords else password
        return self.add_user(User(user_id=self._next_id(), name=name, email=email, password=stored))

    def authenticate(self, email: str, password: str) -> User:
        user = self._users.get_by_email((email or "").strip())
        if not user:
            raise UserNotFoundError("User not found. Please register first.")
        if not verify_password(user.password, password or ""):
            raise InvalidPasswordError("Invalid password. Please try again.")
        return user

    def login(self, email: str, password: str, *, session: Optional[SessionRepository] = None) -> SessionUser:
        user = self.authenticate(email, password)
        s_user = SessionUser(user_id=user.user_id, name=user.name, email=user.email)
        (session or self._session).set_current(s_user)
        logger.info("User %s logged in", user.user_id)
        return s_user

    def logout(self, *, session: Optional[SessionRepository] = None) -> None:
        (session or self._session).clear()

    def current_user(self, *, session: Optional[SessionRepository] = None) -> Optional[SessionUser]:
        return (session or self._session).get_current()
