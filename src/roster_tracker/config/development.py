import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "roster_db"),
}

# Shared access code for the dashboard (not real authentication)
ACCESS_CODE = os.getenv("ACCESS_CODE", "test")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

TOP_ATTENDERS_LIMIT = int(os.getenv("TOP_ATTENDERS_LIMIT", "5"))
INSIGHTS_WINDOW_DAYS = int(os.getenv("INSIGHTS_WINDOW_DAYS", "7"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
