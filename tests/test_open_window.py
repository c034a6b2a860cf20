from datetime import time

import pytest
from sqlalchemy import column
from sqlalchemy.dialects import sqlite

from open_hours.open_window import (
    OPEN_WINDOW_SQL, is_early_morning, is_open, open_window_clause, open_window_params
)
from open_hours.schedule import DayOfWeek, parse_open_hours


@pytest.mark.parametrize("local_time,expected", [
    (time(15, 59), False),
    (time(16, 0), True),
    (time(16, 1), True),
    (time(20, 0), True),
    (time(20, 1), False),
])
def test_straight_interval_bounds_are_inclusive(local_time, expected):
    schedule = parse_open_hours("Wed|16:00-20:00")

    assert is_open(schedule, DayOfWeek.WEDNESDAY, local_time) is expected


@pytest.mark.parametrize("day,local_time,expected", [
    (DayOfWeek.SATURDAY, time(3, 0), False),
    (DayOfWeek.SUNDAY, time(3, 0), True),
    (DayOfWeek.SUNDAY, time(4, 0), True),
    (DayOfWeek.SUNDAY, time(4, 1), False),
    (DayOfWeek.SUNDAY, time(5, 0), False),
    (DayOfWeek.SUNDAY, time(12, 0), True),
    (DayOfWeek.MONDAY, time(3, 0), False),
])
def test_interval_spanning_midnight(day, local_time, expected):
    schedule = parse_open_hours("Sat|20:00-04:00;Sun|10:00-14:00")

    assert is_open(schedule, day, local_time) is expected


def test_late_window_wraps_from_sunday_to_monday():
    schedule = parse_open_hours("Sun|22:00-2:00")

    assert is_open(schedule, DayOfWeek.MONDAY, time(1, 30))
    assert not is_open(schedule, DayOfWeek.SUNDAY, time(1, 30))


def test_interval_ending_at_midnight_covers_next_midnight():
    schedule = parse_open_hours("Fri|11:00-0:00")

    assert is_open(schedule, DayOfWeek.SATURDAY, time(0, 0))
    assert not is_open(schedule, DayOfWeek.SATURDAY, time(0, 1))


def test_spanning_interval_is_not_open_before_midnight_on_its_own_day():
    # Same-day times are checked with start <= time <= end, which a
    # midnight-spanning interval can never satisfy.
    schedule = parse_open_hours("Sat|20:00-04:00")

    assert not is_open(schedule, DayOfWeek.SATURDAY, time(21, 0))


def test_early_morning_window_ignores_same_day_interval():
    schedule = parse_open_hours("Tue|02:00-06:00")

    assert not is_open(schedule, DayOfWeek.TUESDAY, time(3, 0))
    assert not is_open(schedule, DayOfWeek.TUESDAY, time(5, 0))
    assert is_open(schedule, DayOfWeek.TUESDAY, time(5, 1))


def test_missing_day_is_closed():
    assert not is_open(parse_open_hours("Mon|10:00-12:00"), DayOfWeek.TUESDAY, time(11, 0))
    assert not is_open({}, DayOfWeek.TUESDAY, time(11, 0))


def test_is_early_morning_bounds():
    assert is_early_morning(0)
    assert is_early_morning(300)
    assert not is_early_morning(301)


def test_open_window_clause_binds_previous_day_in_early_morning():
    clause = open_window_clause(
        column('day_of_week'), column('start_minute'), column('end_minute'), DayOfWeek.MONDAY, 120
    )
    compiled = clause.compile(dialect=sqlite.dialect(), compile_kwargs={'literal_binds': True})

    assert "'SUNDAY'" in str(compiled)
    assert "start_minute > end_minute" in str(compiled)


def test_open_window_params():
    assert open_window_params(DayOfWeek.MONDAY, 45) == {
        'day': 'MONDAY',
        'previous_day': 'SUNDAY',
        'minute': 45,
        'early_morning_end': 300,
    }
    assert ':previous_day' in OPEN_WINDOW_SQL
