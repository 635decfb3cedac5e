from __future__ import annotations

import uuid
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord, NewAttendee
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, attendee: NewAttendee) -> str:
        attendance_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(
                    id, event_id, full_name, document, neighborhood, phone, invited_by, scanned_by, created_by
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    attendance_id,
                    attendee.event_id,
                    attendee.full_name,
                    attendee.document,
                    attendee.neighborhood,
                    attendee.phone,
                    attendee.invited_by,
                    attendee.scanned_by,
                    attendee.created_by,
                ),
            )
        return attendance_id

    def list_for_event(self, event_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.id, a.event_id, a.full_name, a.document, a.neighborhood, a.phone,
                       a.invited_by, a.scanned_at, e.name AS event_name
                FROM attendance a
                JOIN events e ON e.id = a.event_id
                WHERE a.event_id=%s
                ORDER BY a.scanned_at DESC
                """,
                (event_id,),
            )
            return [
                AttendanceRecord(
                    attendance_id=str(r["id"]),
                    event_id=str(r["event_id"]),
                    full_name=r["full_name"],
                    document=r["document"],
                    neighborhood=r["neighborhood"],
                    phone=r.get("phone"),
                    invited_by=r.get("invited_by"),
                    scanned_at=r.get("scanned_at"),
                    event_name=r.get("event_name"),
                )
                for r in fetchall(cur)
            ]
