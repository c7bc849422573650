from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from ..core.exceptions import StorageError
from .base import LockedStorage


class JsonFileStorage(LockedStorage):
    """All keys kept in one JSON object on disk.

    Every write replaces the whole file through a temp file + os.replace, so a
    crash leaves either the previous document or the new one, never half of it.
    """

    def __init__(self, path: str | Path):
        super().__init__()
        self._path = Path(path)
        self._items: Dict[str, str] = self._read()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        raw = self._path.read_text(encoding="utf-8")
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Storage file {self._path} is not valid JSON") from e
        if not isinstance(data, dict):
            raise StorageError(f"Storage file {self._path} must contain a JSON object")
        return {str(k): str(v) for k, v in data.items()}

    def _flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=self._path.name, suffix=".tmp", dir=str(self._path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(self._items, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except Exception:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        with self.locked():
            previous = dict(self._items)
            self._items[key] = str(value)
            try:
                self._flush()
            except Exception:
                self._items = previous
                raise

    def remove_item(self, key: str) -> None:
        with self.locked():
            if key not in self._items:
                return
            previous = dict(self._items)
            del self._items[key]
            try:
                self._flush()
            except Exception:
                self._items = previous
                raise
