"""Seed a demo teacher account and a small roster into the configured storage."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.classroom_attendance.classroom_attendance.container import build_container
from src.classroom_attendance.classroom_attendance.core.exceptions import DuplicateEmailError

DEMO_STUDENTS = [
    ("Alice Nguyen", "01", "5A"),
    ("Bao Tran", "02", "5A"),
    ("Chloe Pham", "03", "5A"),
    ("David Le", "01", "5B"),
    ("Emma Vo", "02", "5B"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        storage_backend=settings.STORAGE_BACKEND,
        storage_path=getattr(settings, "STORAGE_PATH", None),
        db_config=getattr(settings, "DB_CONFIG", None),
        auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
    )
    store = container.store

    try:
        store.register(name="Demo Teacher", email="teacher@example.com", password="teacher123")
        print("OK: created teacher@example.com / teacher123")
    except DuplicateEmailError:
        print("SKIP: teacher@example.com already exists")

    if store.list_students():
        print("SKIP: roster is not empty")
        return

    for name, roll_number, class_name in DEMO_STUDENTS:
        store.add_student(name, roll_number, class_name)
    print(f"OK: added {len(DEMO_STUDENTS)} students")


if __name__ == "__main__":
    main()
