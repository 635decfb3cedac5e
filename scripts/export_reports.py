"""Write every metrics report for a month to EXPORT_DIR.

Usage: python scripts/export_reports.py <metrics-user-email> [YYYY-MM-DD]
"""

from __future__ import annotations

import getpass
import importlib
import logging
import sys

from dotenv import load_dotenv

from event_attendance.common.datetime_utils import month_start, now_utc, parse_iso_date
from event_attendance.config import get_settings_module
from event_attendance.container import build_container
from event_attendance.export.sink import FileSink
from event_attendance.metrics.service import REPORT_NAMES


def main(argv: list[str]) -> int:
    if not argv:
        print(__doc__.strip().splitlines()[-1])
        return 2

    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        csv_delimiter=getattr(settings, "CSV_DELIMITER", ","),
        csv_with_bom=bool(getattr(settings, "CSV_WITH_BOM", True)),
    )

    actor = container.auth_service.sign_in(argv[0], getpass.getpass("Contraseña: "))
    from_date = parse_iso_date(argv[1]) if len(argv) > 1 else month_start(now_utc())

    sink = FileSink(getattr(settings, "EXPORT_DIR", "exports"))
    for name in REPORT_NAMES:
        export = container.metrics_service.build_report(name, actor=actor, from_date=from_date)
        path = sink.deliver(export.filename, export.content)
        print(f"OK: {path} ({export.row_count} filas)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
