SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
STORAGE_PATH = None
DB_CONFIG = {}
AUTO_INIT_DB = False

SIMULATED_LATENCY_MS = 0
ALLOW_DUPLICATE_SUBMISSION = True
ENFORCE_STUDENT_REFS = True
PASSWORD_HASHING = True

LOG_LEVEL = "WARNING"
LOG_FILE = None

DEBUG = False
TESTING = True
