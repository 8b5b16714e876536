import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "parlor_test_db"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

NIGHT_WINDOW_START = "22:00"
NIGHT_WINDOW_END = "05:00"
ADVANCE_STEP = 10000
SHIFT_TYPE_WINDOWS = {
    "EARLY": ("11:00", "18:00"),
    "LATE": ("18:00", "05:00"),
}
