from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logging_setup import configure_logging
from .container import build_container
from .storage.base import KeyValueStorage
from .students.controller import register as register_students
from .users.controller import register as register_users


def create_app(settings_module: Optional[str] = None, *, storage: Optional[KeyValueStorage] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FILE", None))

    backend = getattr(settings, "STORAGE_BACKEND", "memory")
    if app.config["DEBUG"]:
        print(
            "[classroom-attendance] settings=", settings_module,
            " storage=", backend if storage is None else type(storage).__name__,
        )

    container = build_container(
        storage_backend=backend,
        storage_path=getattr(settings, "STORAGE_PATH", None),
        db_config=getattr(settings, "DB_CONFIG", None),
        auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
        latency_ms=int(getattr(settings, "SIMULATED_LATENCY_MS", 0)),
        allow_duplicate_submission=bool(getattr(settings, "ALLOW_DUPLICATE_SUBMISSION", True)),
        enforce_student_refs=bool(getattr(settings, "ENFORCE_STUDENT_REFS", True)),
        hash_passwords=bool(getattr(settings, "PASSWORD_HASHING", True)),
        storage=storage,
    )
    app.extensions["classroom_attendance"] = container

    register_users(app, container)
    register_students(app, container)
    register_attendance(app, container)

    return app
