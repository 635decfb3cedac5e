import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "event_attendance"),
}

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also create the demo profiles on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

# CSV exports: ',' or ';' (Excel with a Spanish locale expects ';').
CSV_DELIMITER = os.getenv("CSV_DELIMITER", ",")
CSV_WITH_BOM = bool(int(os.getenv("CSV_WITH_BOM", "1")))
EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")

METRICS_CAN_SEE_INDEX = bool(int(os.getenv("METRICS_CAN_SEE_INDEX", "0")))
