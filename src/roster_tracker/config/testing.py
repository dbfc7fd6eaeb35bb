import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "roster_test_db"),
}

ACCESS_CODE = "test-code"

DEBUG = False
TESTING = True
LOG_LEVEL = "DEBUG"

TOP_ATTENDERS_LIMIT = 5
INSIGHTS_WINDOW_DAYS = 7

AUTO_INIT_DB = False
