import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "classroom-attendance-dev-key"

    # Storage: memory | json | mysql
    STORAGE_BACKEND = os.environ.get("STORAGE_BACKEND", "json")
    STORAGE_PATH = os.environ.get("STORAGE_PATH", "instance/classroom_attendance.json")

    # Only used by the mysql backend
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "classroom_attendance")
    AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")

    # Behaviour switches
    SIMULATED_LATENCY_MS = int(os.environ.get("SIMULATED_LATENCY_MS", "0"))
    ALLOW_DUPLICATE_SUBMISSION = env_flag("ALLOW_DUPLICATE_SUBMISSION", "1")
    ENFORCE_STUDENT_REFS = env_flag("ENFORCE_STUDENT_REFS", "1")
    PASSWORD_HASHING = env_flag("PASSWORD_HASHING", "1")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE") or None

    DB_CONFIG = {
        "host": DB_HOST,
        "port": DB_PORT,
        "user": DB_USER,
        "password": DB_PASSWORD,
        "database": DB_NAME,
    }
