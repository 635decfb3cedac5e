from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

import pytest

from event_attendance.core.enums import Role
from event_attendance.core.exceptions import AuthorizationError, ValidationError
from event_attendance.events.model import Event
from event_attendance.events.service import EventService, format_event_line
from event_attendance.users.model import Profile


class InMemoryEvents:
    def __init__(self, events=(), assignments=()):
        self.events: dict[str, Event] = {e.event_id: e for e in events}
        self.assignments: list[tuple[str, str]] = list(assignments)
        self.requested_ids = None
        self._next = 100

    def list_assigned_event_ids(self, user_id):
        return [event_id for event_id, uid in self.assignments if uid == user_id]

    def get_by_ids(self, event_ids):
        self.requested_ids = list(event_ids)
        return [self.events[i] for i in event_ids if i in self.events]

    def get_by_id(self, event_id):
        return self.events.get(event_id)

    def is_assigned(self, *, event_id, user_id):
        return (event_id, user_id) in self.assignments

    def create_event(self, *, name, location, event_date, start_time, end_time, created_by):
        self._next += 1
        ev = Event(
            event_id=f"ev-{self._next}",
            name=name,
            location=location,
            event_date=event_date,
            start_time=start_time,
            end_time=end_time,
            created_by=created_by,
        )
        self.events[ev.event_id] = ev
        return ev

    def assign_staff(self, *, event_id, user_id):
        self.assignments.append((event_id, user_id))

    def list_created_by(self, user_id, limit):
        mine = [e for e in self.events.values() if e.created_by == user_id]
        return mine[:limit]


@dataclass
class InMemoryProfiles:
    profiles: dict[str, Profile] = field(default_factory=dict)

    def get_by_id(self, profile_id: str) -> Optional[Profile]:
        return self.profiles.get(profile_id)


NOW = datetime(2026, 2, 5, 16, 0, 0, tzinfo=timezone.utc)  # 11:00 in UTC-5


def test_pending_events_dedupes_ids_and_orders_nearest_first():
    events = InMemoryEvents(
        events=[
            Event("past", "Pasado", event_date="2026-02-05", end_time="10:00:00"),
            Event("later", "Mañana", event_date="2026-02-06", start_time="08:00:00"),
            Event("soon", "Hoy", event_date="2026-02-05", start_time="12:00:00", end_time="14:00:00"),
            Event("nodate", "Sin fecha"),
        ],
        assignments=[
            ("later", "op-1"),
            ("past", "op-1"),
            ("later", "op-1"),
            ("", "op-1"),
            ("nodate", "op-1"),
            ("soon", "op-1"),
            ("soon", "someone-else"),
        ],
    )
    svc = EventService(events, InMemoryProfiles())

    pending = svc.pending_events_for("op-1", now=NOW)

    assert events.requested_ids == ["later", "past", "nodate", "soon"]
    assert [e.event_id for e in pending] == ["soon", "later", "nodate"]


def test_pending_events_without_assignments_skips_lookup():
    events = InMemoryEvents()
    svc = EventService(events, InMemoryProfiles())

    assert svc.pending_events_for("op-1", now=NOW) == []
    assert events.requested_ids is None


def test_create_event_requires_admin(operator):
    svc = EventService(InMemoryEvents(), InMemoryProfiles())

    with pytest.raises(AuthorizationError):
        svc.create_event(actor=operator, name="Foro", location=None, event_date="2026-02-05", start_time="08:00")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "   "},
        {"event_date": "05/02/2026"},
        {"start_time": "8am"},
        {"end_time": "07:59"},
        {"end_time": "08:00"},
    ],
)
def test_create_event_validation(admin, kwargs):
    svc = EventService(InMemoryEvents(), InMemoryProfiles())
    params = {"name": "Foro", "location": None, "event_date": "2026-02-05", "start_time": "08:00"}
    params.update(kwargs)

    with pytest.raises(ValidationError):
        svc.create_event(actor=admin, **params)


def test_create_event_rejects_non_operator_assignment(admin):
    profiles = InMemoryProfiles({"m1": Profile("m1", "m@x.co", "M", Role.METRICS, raw_role="METRICAS")})
    svc = EventService(InMemoryEvents(), profiles)

    with pytest.raises(ValidationError):
        svc.create_event(
            actor=admin, name="Foro", location=None, event_date="2026-02-05", start_time="08:00", operator_id="m1"
        )


def test_create_event_stores_minutes_and_assigns_operator(admin):
    events = InMemoryEvents()
    profiles = InMemoryProfiles({"op-1": Profile("op-1", "o@x.co", "Op", Role.OPERATOR, raw_role="operario")})
    svc = EventService(events, profiles)

    created = svc.create_event(
        actor=admin,
        name="  Foro barrial ",
        location="  ",
        event_date="2026-02-05",
        start_time="08:00:45",
        end_time="10:30",
        operator_id="op-1",
    )

    assert created.name == "Foro barrial"
    assert created.location is None
    assert created.event_date == date(2026, 2, 5)
    assert created.start_time == time(8, 0)
    assert created.end_time == time(10, 30)
    assert created.created_by == "admin"
    assert events.assignments == [(created.event_id, "op-1")]


def test_create_event_without_end_time_or_operator(admin):
    events = InMemoryEvents()
    svc = EventService(events, InMemoryProfiles())

    created = svc.create_event(
        actor=admin, name="Foro", location="Plaza", event_date="2026-02-05", start_time="08:00", end_time=""
    )

    assert created.end_time is None
    assert events.assignments == []
    assert [e.event_id for e in svc.list_created_by("admin")] == [created.event_id]


def test_format_event_line():
    full = Event("1", "Foro", location="Plaza", event_date="2026-02-05", start_time=timedelta(hours=8), end_time="18:00:00")
    start_only = Event("2", "Foro", event_date=date(2026, 2, 5), start_time=time(0, 0))

    assert format_event_line(full) == "2026-02-05 | 08:00 - 18:00 | Plaza"
    assert format_event_line(start_only) == "2026-02-05 | 00:00"


def test_pending_events_keep_events_at_the_end_of_the_calendar():
    events = InMemoryEvents(
        events=[
            Event("last-day", "Fin", event_date="9999-12-31", end_time="20:00:00"),
            Event("soon", "Hoy", event_date="2026-02-05", end_time="14:00:00"),
        ],
        assignments=[("last-day", "op-1"), ("soon", "op-1")],
    )
    svc = EventService(events, InMemoryProfiles())

    pending = svc.pending_events_for("op-1", now=NOW)

    assert [e.event_id for e in pending] == ["soon", "last-day"]
