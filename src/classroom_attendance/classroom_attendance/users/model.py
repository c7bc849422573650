from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Domain entity: a registered teacher account.

    Note: plain data object (no storage access). `password` holds whatever was
    stored: a werkzeug hash, or plain text for legacy data.
    """

    user_id: str
    name: str
    email: str
    password: str


@dataclass(frozen=True)
class SessionUser:
    """What we store under `currentUser` after login (never the password)."""

    user_id: str
    name: str
    email: str
