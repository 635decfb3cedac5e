import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "event_attendance"),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

CSV_DELIMITER = os.getenv("CSV_DELIMITER", ";")
CSV_WITH_BOM = bool(int(os.getenv("CSV_WITH_BOM", "1")))
EXPORT_DIR = os.getenv("EXPORT_DIR", "/var/lib/event_attendance/exports")

METRICS_CAN_SEE_INDEX = bool(int(os.getenv("METRICS_CAN_SEE_INDEX", "0")))
