from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendee registered at an event."""

    attendance_id: str
    event_id: str
    full_name: str
    document: str
    neighborhood: str
    phone: Optional[str] = None
    invited_by: Optional[str] = None
    scanned_at: Optional[datetime] = None
    event_name: Optional[str] = None


@dataclass(frozen=True)
class NewAttendee:
    event_id: str
    full_name: str
    document: str
    neighborhood: str
    phone: Optional[str]
    invited_by: Optional[str]
    scanned_by: str
    created_by: str
