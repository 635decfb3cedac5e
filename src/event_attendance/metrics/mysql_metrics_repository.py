from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, stored_rows
from .model import AttendanceExportRow, NeighborhoodTotal
from .repository import MetricsRepository


class MySQLMetricsRepository(MetricsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def count_events_since(self, from_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM events WHERE event_date >= %s", (from_date,))
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def count_attendance_since(self, from_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM attendance WHERE created_at >= %s", (from_date,))
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def attendance_by_neighborhood(self, from_date: date) -> Sequence[NeighborhoodTotal]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.callproc("attendance_by_barrio_month", (from_date,))
            rows = stored_rows(cur, ["neighborhood", "total"])
            return [
                NeighborhoodTotal(neighborhood=str(r["neighborhood"] or ""), total=int(r["total"] or 0))
                for r in rows
            ]

    def attendance_rows_since(self, from_date: date) -> Sequence[AttendanceExportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT event_id, event_name, event_date, location, full_name, document, neighborhood,
                       phone, invited_by, scanned_at, scanned_by_name, scanned_by_email, created_at
                FROM v_attendance_with_event
                WHERE created_at >= %s
                ORDER BY event_date DESC, scanned_at DESC
                """,
                (from_date,),
            )
            return [
                AttendanceExportRow(
                    event_id=r.get("event_id"),
                    event_name=r.get("event_name"),
                    event_date=r.get("event_date"),
                    location=r.get("location"),
                    full_name=r.get("full_name"),
                    document=r.get("document"),
                    neighborhood=r.get("neighborhood"),
                    phone=r.get("phone"),
                    invited_by=r.get("invited_by"),
                    scanned_at=r.get("scanned_at"),
                    scanned_by_name=r.get("scanned_by_name"),
                    scanned_by_email=r.get("scanned_by_email"),
                    created_at=r.get("created_at"),
                )
                for r in fetchall(cur)
            ]
