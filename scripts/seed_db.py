from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from event_attendance.config import get_settings_module
from event_attendance.database.bootstrap import DEMO_PROFILES, ensure_demo_profiles


def main() -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_demo_profiles(db_config)

    print(
        "OK: Seeded demo profiles -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )
    for email, _, role, password in DEMO_PROFILES:
        print(f"  {role:<9} {email} / {password}")


if __name__ == "__main__":
    main()
