from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import CURRENT_USER_KEY, USERS_KEY
from ..core.exceptions import DuplicateEmailError
from ..storage.base import KeyValueStorage
from ..storage.json_codec import load_list, load_object, save_list, save_object
from .model import SessionUser, User
from .repository import SessionRepository, UserRepository


def _from_row(row: dict) -> User:
    return User(
        user_id=str(row.get("id") or row.get("_id") or ""),
        name=str(row.get("name") or ""),
        email=str(row.get("email") or ""),
        password=str(row.get("password") or ""),
    )


def _to_row(user: User) -> dict:
    return {"id": user.user_id, "name": user.name, "email": user.email, "password": user.password}


class KVUserRepository(UserRepository):
    def __init__(self, storage: KeyValueStorage):
        self._storage = storage

    def list_all(self) -> Sequence[User]:
        return [_from_row(r) for r in load_list(self._storage, USERS_KEY)]

    def get_by_email(self, email: str) -> Optional[User]:
        for row in load_list(self._storage, USERS_KEY):
            if row.get("email") == email:
                return _from_row(row)
        return None

    def add(self, user: User) -> User:
        with self._storage.locked():
            rows = load_list(self._storage, USERS_KEY)
            if any(r.get("email") == user.email for r in rows):
                raise DuplicateEmailError("A user with this email already exists")
            rows.append(_to_row(user))
            save_list(self._storage, USERS_KEY, rows)
        return user


class KVSessionRepository(SessionRepository):
    def __init__(self, storage: KeyValueStorage):
        self._storage = storage

    def get_current(self) -> Optional[SessionUser]:
        row = load_object(self._storage, CURRENT_USER_KEY)
        if not row:
            return None
        return SessionUser(
            user_id=str(row.get("id") or ""),
            name=str(row.get("name") or ""),
            email=str(row.get("email") or ""),
        )

    def set_current(self, user: SessionUser) -> None:
        save_object(self._storage, CURRENT_USER_KEY, {"id": user.user_id, "name": user.name, "email": user.email})

    def clear(self) -> None:
        self._storage.remove_item(CURRENT_USER_KEY)
