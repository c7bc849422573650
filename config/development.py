from .config import Config

SECRET_KEY = Config.SECRET_KEY

STORAGE_BACKEND = Config.STORAGE_BACKEND
STORAGE_PATH = Config.STORAGE_PATH
DB_CONFIG = Config.DB_CONFIG
# If enabled, the mysql backend creates its database/table on startup (idempotent)
AUTO_INIT_DB = Config.AUTO_INIT_DB

SIMULATED_LATENCY_MS = Config.SIMULATED_LATENCY_MS
ALLOW_DUPLICATE_SUBMISSION = Config.ALLOW_DUPLICATE_SUBMISSION
ENFORCE_STUDENT_REFS = Config.ENFORCE_STUDENT_REFS
PASSWORD_HASHING = Config.PASSWORD_HASHING

LOG_LEVEL = "DEBUG"
LOG_FILE = Config.LOG_FILE

DEBUG = True
