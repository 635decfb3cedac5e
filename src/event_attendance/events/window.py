"""Pending/past classification of events.

An event is *past* once its effective end instant (date + end time, or date + start time
when there is no end time) is strictly before `now`. Schedule values are local wall-clock
times in the fixed UTC-5 reference offset. Anything that cannot be turned into an instant
counts as pending, so incomplete events are never hidden from staff.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence, TypeVar

from ..common.datetime_utils import REFERENCE_TZ, as_utc, coerce_date, coerce_time
from .model import Event

E = TypeVar("E", bound=Event)


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def effective_end_instant(event: Event) -> Optional[datetime]:
    """Absolute (UTC) end of the event, or None when it cannot be determined."""

    if _is_blank(event.event_date):
        return None

    raw_time = event.end_time if not _is_blank(event.end_time) else event.start_time
    if _is_blank(raw_time):
        return None

    day = coerce_date(event.event_date)
    clock = coerce_time(raw_time)
    if day is None or clock is None:
        return None

    local = datetime.combine(day, clock.replace(tzinfo=None, microsecond=0), tzinfo=REFERENCE_TZ)
    try:
        return local.astimezone(timezone.utc)
    except (OverflowError, ValueError):
        # 9999-12-31 late in the day has no UTC counterpart.
        return None


def is_past(event: Event, now: datetime) -> bool:
    end = effective_end_instant(event)
    if end is None:
        return False
    return end < as_utc(now)


def filter_pending(events: Iterable[E], now: datetime) -> list[E]:
    return [ev for ev in events if not is_past(ev, now)]


def _upcoming_key(event: Event) -> tuple[int, float]:
    end = effective_end_instant(event)
    if end is None:
        return (1, 0.0)
    return (0, end.timestamp())


def sort_by_upcoming(events: Iterable[E]) -> list[E]:
    """Nearest end first; unknown instants last in input order (sorted() is stable)."""
    return sorted(events, key=_upcoming_key)


def pending_upcoming(events: Sequence[E], now: datetime) -> list[E]:
    return sort_by_upcoming(filter_pending(events, now))
