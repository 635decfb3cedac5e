from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol, Sequence

from .model import Event


class EventRepository(Protocol):
    def list_assigned_event_ids(self, user_id: str) -> Sequence[str]:
        raise NotImplementedError

    def get_by_ids(self, event_ids: Sequence[str]) -> Sequence[Event]:
        raise NotImplementedError

    def get_by_id(self, event_id: str) -> Optional[Event]:
        raise NotImplementedError

    def is_assigned(self, *, event_id: str, user_id: str) -> bool:
        raise NotImplementedError

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
        raise NotImplementedError

    def assign_staff(self, *, event_id: str, user_id: str) -> None:
        raise NotImplementedError

    def list_created_by(self, user_id: str, limit: int) -> Sequence[Event]:
        raise NotImplementedError
