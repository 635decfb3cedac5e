from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Optional

from ..core.constants import REFERENCE_UTC_OFFSET_HOURS

REFERENCE_TZ = timezone(timedelta(hours=REFERENCE_UTC_OFFSET_HOURS), "UTC-05:00")

_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_TIME_RE = re.compile(r"^(\d{2}):(\d{2})(?::(\d{2}))?$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_clock_time(value: str) -> time:
    """Parse HH:MM or HH:MM:SS string into time (raises ValueError)."""
    parsed = coerce_time(value)
    if parsed is None:
        raise ValueError(f"Invalid time string: {value!r}")
    return parsed


def coerce_date(value: Any) -> Optional[date]:
    """Best-effort conversion of a stored date value; None when it cannot be read."""

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        m = _DATE_RE.match(value.strip())
        if not m:
            return None
        try:
            return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
        except ValueError:
            return None
    return None


def coerce_time(value: Any) -> Optional[time]:
    """Best-effort conversion of a stored time-of-day; missing seconds count as zero.

    Accepts datetime.time, the timedelta mysql-connector returns for TIME columns,
    and HH:MM / HH:MM:SS strings.
    """

    if value is None:
        return None
    if isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds())
        if total_seconds < 0 or total_seconds >= 86400:
            return None
        return time(total_seconds // 3600, (total_seconds % 3600) // 60, total_seconds % 60)
    if isinstance(value, str):
        m = _TIME_RE.match(value.strip())
        if not m:
            return None
        try:
            return time(int(m.group(1)), int(m.group(2)), int(m.group(3) or 0))
        except ValueError:
            return None
    return None


def as_utc(moment: datetime) -> datetime:
    """Aware UTC datetime; naive values are taken to be UTC already."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def reference_today(now: datetime) -> date:
    """Calendar date of `now` in the reference offset."""
    return as_utc(now).astimezone(REFERENCE_TZ).date()


def month_start(now: datetime) -> date:
    return reference_today(now).replace(day=1)


def now_utc() -> datetime:
    """Current instant.

    Note: Only called at the edges (controllers); services receive `now` explicitly.
    """
    return datetime.now(timezone.utc)
