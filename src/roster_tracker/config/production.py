import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "roster_db"),
}

ACCESS_CODE = os.getenv("ACCESS_CODE", "please-set-ACCESS_CODE")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

TOP_ATTENDERS_LIMIT = int(os.getenv("TOP_ATTENDERS_LIMIT", "5"))
INSIGHTS_WINDOW_DAYS = int(os.getenv("INSIGHTS_WINDOW_DAYS", "7"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
