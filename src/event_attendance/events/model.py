from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

DateValue = Union[date, str, None]
TimeValue = Union[time, timedelta, str, None]


@dataclass(frozen=True)
class Event:
    """Domain entity: an event staff can be assigned to.

    Schedule fields are kept as they come from storage; they are only interpreted by
    `events.window`, which tolerates missing or malformed values.
    """

    event_id: str
    name: str
    location: Optional[str] = None
    event_date: DateValue = None
    start_time: TimeValue = None
    end_time: TimeValue = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
