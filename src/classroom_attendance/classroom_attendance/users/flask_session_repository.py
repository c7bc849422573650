from __future__ import annotations

from typing import Optional

from flask import session

from ..core.constants import CURRENT_USER_KEY
from .model import SessionUser
from .repository import SessionRepository


class FlaskSessionRepository(SessionRepository):
    """`currentUser` kept in Flask's signed cookie session, one per browser.

    Only usable inside a request context.
    """

    def get_current(self) -> Optional[SessionUser]:
        row = session.get(CURRENT_USER_KEY)
        if not isinstance(row, dict) or not row.get("id"):
            return None
        return SessionUser(
            user_id=str(row["id"]),
            name=str(row.get("name") or ""),
            email=str(row.get("email") or ""),
        )

    def set_current(self, user: SessionUser) -> None:
        session[CURRENT_USER_KEY] = {"id": user.user_id, "name": user.name, "email": user.email}

    def clear(self) -> None:
        session.pop(CURRENT_USER_KEY, None)
