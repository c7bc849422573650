from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_LATENCY_MS
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .storage.base import KeyValueStorage
from .storage.json_file_storage import JsonFileStorage
from .storage.memory_storage import InMemoryStorage
from .storage.mysql_storage import MySQLStorage
from .store import AttendanceStore, build_store


@dataclass(frozen=True)
class Container:
    storage: KeyValueStorage
    store: AttendanceStore


def build_storage(
    backend: str,
    *,
    storage_path: Optional[str] = None,
    db_config: Optional[dict] = None,
    auto_init_db: bool = False,
) -> KeyValueStorage:
    backend = (backend or "memory").lower()
    if backend == "memory":
        return InMemoryStorage()
    if backend == "json":
        if not storage_path:
            raise ValueError("STORAGE_PATH is required for the json storage backend")
        return JsonFileStorage(storage_path)
    if backend == "mysql":
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql storage backend")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        if auto_init_db:
            apply_schema(conn)
        return MySQLStorage(conn)
    raise ValueError(f"Unknown storage backend: {backend!r}")


def build_container(
    *,
    storage_backend: str = "memory",
    storage_path: Optional[str] = None,
    db_config: Optional[dict] = None,
    auto_init_db: bool = False,
    latency_ms: int = DEFAULT_LATENCY_MS,
    allow_duplicate_submission: bool = True,
    enforce_student_refs: bool = True,
    hash_passwords: bool = True,
    storage: Optional[KeyValueStorage] = None,
) -> Container:
    if storage is None:
        storage = build_storage(
            storage_backend,
            storage_path=storage_path,
            db_config=db_config,
            auto_init_db=auto_init_db,
        )

    store = build_store(
        storage,
        latency_ms=latency_ms,
        allow_duplicate_submission=allow_duplicate_submission,
        enforce_student_refs=enforce_student_refs,
        hash_passwords=hash_passwords,
    )
    return Container(storage=storage, store=store)
