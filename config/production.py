import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "parlor_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

NIGHT_WINDOW_START = os.getenv("NIGHT_WINDOW_START", "22:00")
NIGHT_WINDOW_END = os.getenv("NIGHT_WINDOW_END", "05:00")
ADVANCE_STEP = int(os.getenv("ADVANCE_STEP", "10000"))
SHIFT_TYPE_WINDOWS = {
    "EARLY": (os.getenv("EARLY_OPEN", "11:00"), os.getenv("EARLY_CLOSE", "18:00")),
    "LATE": (os.getenv("LATE_OPEN", "18:00"), os.getenv("LATE_CLOSE", "05:00")),
}
