from __future__ import annotations

import uuid
from datetime import date, time
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Event
from .repository import EventRepository

_COLUMNS = "id, name, location, event_date, start_time, end_time, created_by, created_at"


def _to_event(row: dict) -> Event:
    # TIME columns come back as timedelta; events.window understands that form.
    return Event(
        event_id=str(row["id"]),
        name=row["name"],
        location=row.get("location"),
        event_date=row.get("event_date"),
        start_time=row.get("start_time"),
        end_time=row.get("end_time"),
        created_by=row.get("created_by"),
        created_at=row.get("created_at"),
    )


class MySQLEventRepository(EventRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_assigned_event_ids(self, user_id: str) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT event_id FROM event_staff WHERE user_id=%s", (user_id,))
            return [str(r["event_id"]) for r in fetchall(cur)]

    def get_by_ids(self, event_ids: Sequence[str]) -> Sequence[Event]:
        ids = list(event_ids)
        if not ids:
            return []
        placeholders = ", ".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM events WHERE id IN ({placeholders})", tuple(ids))
            return [_to_event(r) for r in fetchall(cur)]

    def get_by_id(self, event_id: str) -> Optional[Event]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM events WHERE id=%s", (event_id,))
            row = fetchone(cur)
            return _to_event(row) if row else None

    def is_assigned(self, *, event_id: str, user_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS ok FROM event_staff WHERE event_id=%s AND user_id=%s",
                (event_id, user_id),
            )
            return fetchone(cur) is not None

    def create_event(
        self,
        *,
        name: str,
        location: Optional[str],
        event_date: date,
        start_time: time,
        end_time: Optional[time],
        created_by: str,
    ) -> Event:
        event_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO events(id, name, location, event_date, start_time, end_time, created_by)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (event_id, name, location, event_date, start_time, end_time, created_by),
            )
        return Event(
            event_id=event_id,
            name=name,
            location=location,
            event_date=event_date,
            start_time=start_time,
            end_time=end_time,
            created_by=created_by,
        )

    def assign_staff(self, *, event_id: str, user_id: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT IGNORE INTO event_staff(event_id, user_id) VALUES(%s,%s)",
                (event_id, user_id),
            )

    def list_created_by(self, user_id: str, limit: int) -> Sequence[Event]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM events
                WHERE created_by=%s
                ORDER BY created_at DESC
                LIMIT %s
                """,
                (user_id, int(limit)),
            )
            return [_to_event(r) for r in fetchall(cur)]
