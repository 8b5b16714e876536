import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "parlor_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Late-night premium band; may wrap past midnight.
NIGHT_WINDOW_START = os.getenv("NIGHT_WINDOW_START", "22:00")
NIGHT_WINDOW_END = os.getenv("NIGHT_WINDOW_END", "05:00")

# Advance payments are entered in steps of this many yen.
ADVANCE_STEP = int(os.getenv("ADVANCE_STEP", "10000"))

# Opening / closing instants checked by the shift board.
SHIFT_TYPE_WINDOWS = {
    "EARLY": ("11:00", "18:00"),
    "LATE": ("18:00", "05:00"),
}
