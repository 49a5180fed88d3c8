import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "pontaj_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

HOURS_MODEL = os.getenv("HOURS_MODEL", "generalized")
MAX_SHIFT_HOURS = int(os.getenv("MAX_SHIFT_HOURS", "48"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
