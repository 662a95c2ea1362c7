"""Derived batch status from the date range."""

from datetime import date, datetime, timedelta

import pytest

from institute_admin.services.batch_lifecycle import (
    ACTIVE,
    COMPLETED,
    UPCOMING,
    compute_status,
    duration_days,
    parse_date,
)

START = date(2025, 1, 1)
END = date(2025, 4, 30)


@pytest.mark.parametrize(
    "today, expected",
    [
        (date(2024, 12, 31), UPCOMING),
        (START, ACTIVE),
        (date(2025, 2, 15), ACTIVE),
        (END, ACTIVE),
        (date(2025, 5, 1), COMPLETED),
    ],
)
def test_compute_status_boundaries(today, expected):
    assert compute_status(START, END, today) == expected


def test_compute_status_accepts_iso_strings_and_datetimes():
    assert compute_status("2025-01-01", "2025-04-30T00:00:00.000Z", "2025-03-01") == ACTIVE
    assert compute_status(datetime(2025, 1, 1, 9, 30), END, datetime(2025, 5, 2, 8, 0)) == COMPLETED


def test_malformed_dates_default_to_upcoming():
    assert compute_status("not-a-date", END, date(2025, 2, 1)) == UPCOMING
    assert compute_status(START, None, date(2030, 1, 1)) == UPCOMING
    assert compute_status("", "", date(2025, 2, 1)) == UPCOMING


def test_status_is_monotonic_once_end_has_passed():
    seen_completed = False
    day = date(2024, 12, 1)
    while day <= date(2025, 8, 1):
        status = compute_status(START, END, day)
        assert status in {UPCOMING, ACTIVE, COMPLETED}
        if seen_completed:
            assert status == COMPLETED
        seen_completed = seen_completed or status == COMPLETED
        day += timedelta(days=1)
    assert seen_completed


def test_parse_date_returns_none_for_garbage():
    assert parse_date("2025-13-40") is None
    assert parse_date(None) is None
    assert parse_date("2025-02-03T10:00:00Z") == date(2025, 2, 3)


def test_duration_days_has_a_floor_of_one():
    assert duration_days(START, END) == 119
    assert duration_days(START, START) == 1
    assert duration_days("bad", END) == 1
