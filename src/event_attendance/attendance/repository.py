from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord, NewAttendee


class AttendanceRepository(Protocol):
    def create(self, attendee: NewAttendee) -> str:
        raise NotImplementedError

    def list_for_event(self, event_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
