import os

from .config import Config, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")
STORAGE_PATH = Config.STORAGE_PATH
DB_CONFIG = Config.DB_CONFIG
AUTO_INIT_DB = Config.AUTO_INIT_DB

SIMULATED_LATENCY_MS = 0
ALLOW_DUPLICATE_SUBMISSION = Config.ALLOW_DUPLICATE_SUBMISSION
ENFORCE_STUDENT_REFS = Config.ENFORCE_STUDENT_REFS
PASSWORD_HASHING = env_flag("PASSWORD_HASHING", "1")

LOG_LEVEL = Config.LOG_LEVEL
LOG_FILE = os.getenv("LOG_FILE", "logs/classroom_attendance.log")

DEBUG = False
