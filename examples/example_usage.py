"""Example: use the service layer directly (no Flask).

Prints the pending events of an operator, nearest first.
"""

import importlib
import sys

from event_attendance.common.datetime_utils import now_utc
from event_attendance.config import get_settings_module
from event_attendance.container import build_container
from event_attendance.events.service import format_event_line


def main(user_id: str):
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    for ev in container.event_service.pending_events_for(user_id, now=now_utc()):
        print(f"{ev.name}: {format_event_line(ev)}")


if __name__ == "__main__":
    main(sys.argv[1])
