from datetime import date, datetime, time, timedelta, timezone

import pytest

from event_attendance.common.datetime_utils import (
    coerce_date,
    coerce_time,
    month_start,
    parse_clock_time,
    reference_today,
)


def test_coerce_time_reads_mysql_timedelta():
    assert coerce_time(timedelta(hours=18, minutes=5, seconds=7)) == time(18, 5, 7)
    assert coerce_time(timedelta(hours=24)) is None
    assert coerce_time(timedelta(seconds=-1)) is None


@pytest.mark.parametrize("raw", ["8:00", "08:00:0", "25:00", "08:60", "ab:cd", "08:00:00.5"])
def test_coerce_time_rejects_malformed_text(raw):
    assert coerce_time(raw) is None


def test_coerce_date():
    assert coerce_date(datetime(2026, 2, 5, 23, 0)) == date(2026, 2, 5)
    assert coerce_date(" 2026-02-05 ") == date(2026, 2, 5)
    assert coerce_date("2026-02-30") is None
    assert coerce_date("2026-2-5") is None


def test_parse_clock_time_raises_value_error():
    assert parse_clock_time("07:30") == time(7, 30)
    with pytest.raises(ValueError):
        parse_clock_time("7:30")


def test_month_start_uses_reference_offset():
    # 03:00 UTC on March 1st is still February 28th in UTC-5
    now = datetime(2026, 3, 1, 3, 0, tzinfo=timezone.utc)

    assert reference_today(now) == date(2026, 2, 28)
    assert month_start(now) == date(2026, 2, 1)
    assert month_start(datetime(2026, 3, 1, 5, 0)) == date(2026, 3, 1)
