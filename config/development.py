import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "pontaj_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# "generalized": any 1..MAX_SHIFT_HOURS code counts; "legacy": only "24" shifts count
HOURS_MODEL = os.getenv("HOURS_MODEL", "generalized")
MAX_SHIFT_HOURS = int(os.getenv("MAX_SHIFT_HOURS", "48"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE TABLE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
