from __future__ import annotations

import json
from typing import Any, List, Optional

from ..core.exceptions import StorageError
from .base import KeyValueStorage


def load_list(storage: KeyValueStorage, key: str) -> List[dict]:
    """Read a JSON array stored under `key`; a missing key is an empty list."""
    raw = storage.get_item(key)
    if raw is None or not raw.strip():
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise StorageError(f"Stored value for '{key}' is not valid JSON") from e
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise StorageError(f"Stored value for '{key}' must be a JSON array of objects")
    return data


def save_list(storage: KeyValueStorage, key: str, items: List[dict]) -> None:
    storage.set_item(key, json.dumps(items, ensure_ascii=False))


def load_object(storage: KeyValueStorage, key: str) -> Optional[dict]:
    raw = storage.get_item(key)
    if raw is None or not raw.strip():
        return None
    try:
        data: Any = json.loads(raw)
    except json.JSONDecodeError as e:
        raise StorageError(f"Stored value for '{key}' is not valid JSON") from e
    if not isinstance(data, dict):
        raise StorageError(f"Stored value for '{key}' must be a JSON object")
    return data


def save_object(storage: KeyValueStorage, key: str, value: dict) -> None:
    storage.set_item(key, json.dumps(value, ensure_ascii=False))
