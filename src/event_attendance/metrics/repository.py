from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceExportRow, NeighborhoodTotal


class MetricsRepository(Protocol):
    def count_events_since(self, from_date: date) -> int:
        raise NotImplementedError

    def count_attendance_since(self, from_date: date) -> int:
        raise NotImplementedError

    def attendance_by_neighborhood(self, from_date: date) -> Sequence[NeighborhoodTotal]:
        raise NotImplementedError

    def attendance_rows_since(self, from_date: date) -> Sequence[AttendanceExportRow]:
        """Rows ordered by event date, then scan time, both descending."""

        raise NotImplementedError
