from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator, Optional, Protocol


class KeyValueStorage(Protocol):
    """Text key-value storage (the browser's localStorage, in spirit).

    Note (DIP): repositories depend on this interface, never on a concrete backend.
    """

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError

    def locked(self):
        """Context manager serializing read-modify-write sequences."""

        raise NotImplementedError


class LockedStorage:
    """Mixin giving a backend one re-entrant write lock shared by all repositories."""

    def __init__(self) -> None:
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield
