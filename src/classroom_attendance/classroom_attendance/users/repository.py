from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SessionUser, User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, not on a concrete storage.
    """

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def add(self, user: User) -> User:
        """Append a user; raises DuplicateEmailError when the email is taken."""

        raise NotImplementedError


class SessionRepository(Protocol):
    def get_current(self) -> Optional[SessionUser]:
        raise NotImplementedError

    def set_current(self, user: SessionUser) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError
