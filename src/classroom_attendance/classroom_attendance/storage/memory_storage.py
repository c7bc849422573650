from __future__ import annotations

from typing import Dict, Optional

from .base import LockedStorage


class InMemoryStorage(LockedStorage):
    """Process-local storage; the default backend and the test double."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        super().__init__()
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        with self.locked():
            self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        with self.locked():
            self._items.pop(key, None)

    def snapshot(self) -> Dict[str, str]:
        return dict(self._items)
