"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

USERS_KEY = "users"
STUDENTS_KEY = "students"
ATTENDANCE_KEY = "attendance"
CURRENT_USER_KEY = "currentUser"

ALL_CLASSES = "all"

UNKNOWN_STUDENT_NAME = "Unknown Student"
UNKNOWN_ROLL_NUMBER = "N/A"

DEFAULT_LATENCY_MS = 0
DATE_FORMAT = "%Y-%m-%d"
