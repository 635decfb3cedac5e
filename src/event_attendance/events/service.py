from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Optional, Sequence

from ..common.datetime_utils import coerce_date, coerce_time, parse_clock_time, parse_iso_date
from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_EVENTS_LIMIT
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..users.repository import ProfileRepository
from ..users.service import SessionProfile
from .model import Event
from .repository import EventRepository
from .window import pending_upcoming

logger = logging.getLogger(__name__)


def _present(value) -> bool:
    return value is not None and value != ""


def _hhmm(value) -> str:
    t = coerce_time(value)
    if t is not None:
        return t.strftime("%H:%M")
    return str(value)[:5] if value else ""


def format_event_line(event: Event) -> str:
    """'2026-02-05 | 08:00 - 18:00 | Plaza' (parts omitted when missing)."""

    d = coerce_date(event.event_date)
    line = d.isoformat() if d else (str(event.event_date) if event.event_date else "")
    if _present(event.start_time):
        line += f" | {_hhmm(event.start_time)}"
    if _present(event.end_time):
        line += f" - {_hhmm(event.end_time)}"
    if event.location:
        line += f" | {event.location}"
    return line.strip(" |")


class EventService:
    def __init__(self, events: EventRepository, profiles: ProfileRepository):
        self._events = events
        self._profiles = profiles

    def pending_events_for(self, user_id: str, *, now: datetime) -> list[Event]:
        """Events assigned to the user that have not finished, nearest first."""

        ids = list(dict.fromkeys(str(i) for i in self._events.list_assigned_event_ids(user_id) if i))
        if not ids:
            return []
        events = self._events.get_by_ids(ids)
        pending = pending_upcoming(list(events), now)
        logger.debug("User %s: %d assigned, %d pending", user_id, len(events), len(pending))
        return pending

    def create_event(
        self,
        *,
        actor: SessionProfile,
        name: str,
        location: Optional[str],
        event_date: str | date,
        start_time: str | time,
        end_time: str | time | None = None,
        operator_id: Optional[str] = None,
    ) -> Event:
        if actor.role != Role.ADMIN:
            raise AuthorizationError("Solo ADMIN puede crear eventos.")

        name = require_non_empty(name, "Falta el nombre del evento")
        day = self._parse_date(event_date)
        start = self._parse_time(start_time, "Hora de inicio")
        end = None if end_time in (None, "") else self._parse_time(end_time, "Hora de fin")
        if end is not None and end <= start:
            raise ValidationError("La hora de fin debe ser mayor a la hora de inicio.")

        operator_id = optional_text(operator_id)
        if operator_id:
            operator = self._profiles.get_by_id(operator_id)
            if not operator or operator.role != Role.OPERATOR:
                raise ValidationError("Operador no válido")

        created = self._events.create_event(
            name=name,
            location=optional_text(location),
            event_date=day,
            start_time=start,
            end_time=end,
            created_by=actor.profile_id,
        )
        if operator_id:
            self._events.assign_staff(event_id=created.event_id, user_id=operator_id)

        logger.info(
            "Event %s created by %s%s",
            created.event_id,
            actor.profile_id,
            f" and assigned to {operator_id}" if operator_id else "",
        )
        return created

    def list_created_by(self, user_id: str, *, limit: int = DEFAULT_EVENTS_LIMIT) -> Sequence[Event]:
        return self._events.list_created_by(user_id, limit)

    @staticmethod
    def _parse_date(value: str | date) -> date:
        if isinstance(value, date):
            return value
        try:
            return parse_iso_date((value or "").strip())
        except ValueError as exc:
            raise ValidationError("Fecha inválida (YYYY-MM-DD)") from exc

    @staticmethod
    def _parse_time(value: str | time, label: str) -> time:
        if isinstance(value, time):
            t = value
        else:
            try:
                t = parse_clock_time((value or "").strip())
            except ValueError as exc:
                raise ValidationError(f"{label} inválida (HH:MM)") from exc
        # Stored as HH:MM:00, the pickers only offer minute precision.
        return t.replace(second=0, microsecond=0)
