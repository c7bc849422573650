"""Backup the stored collections.

Note: Writes the raw value of every known key into backups/, whatever the
storage backend is, so the file can be loaded back into a JsonFileStorage.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.classroom_attendance.classroom_attendance.container import build_storage
from src.classroom_attendance.classroom_attendance.core.constants import (
    ATTENDANCE_KEY,
    CURRENT_USER_KEY,
    STUDENTS_KEY,
    USERS_KEY,
)


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    storage = build_storage(
        settings.STORAGE_BACKEND,
        storage_path=getattr(settings, "STORAGE_PATH", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )

    snapshot = {}
    for key in (USERS_KEY, STUDENTS_KEY, ATTENDANCE_KEY, CURRENT_USER_KEY):
        value = storage.get_item(key)
        if value is not None:
            snapshot[key] = value

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"classroom_attendance_{ts}.json"
    out_file.write_text(json.dumps(snapshot, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({len(snapshot)} keys)")


if __name__ == "__main__":
    main()
