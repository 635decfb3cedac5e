from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class NeighborhoodTotal:
    neighborhood: str
    total: int


@dataclass(frozen=True)
class AttendanceExportRow:
    """Read-model over `v_attendance_with_event` used for report exports."""

    event_id: Optional[str]
    event_name: Optional[str]
    event_date: Optional[date]
    location: Optional[str]
    full_name: Optional[str]
    document: Optional[str]
    neighborhood: Optional[str]
    phone: Optional[str]
    invited_by: Optional[str]
    scanned_at: Optional[datetime]
    scanned_by_name: Optional[str] = None
    scanned_by_email: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class MetricsSnapshot:
    from_date: date
    events_count: int
    attendance_count: int
    by_neighborhood: list[NeighborhoodTotal] = field(default_factory=list)


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: str
    row_count: int = 0
