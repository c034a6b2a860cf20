"""When is a weekly open interval open?

The rule lives in ``open_window_predicate`` only. The in-memory evaluator
calls it with plain ints, the query builder calls it with SQLAlchemy columns,
and ``OPEN_WINDOW_SQL`` spells the same rule out for hand-written statements.

An interval whose start minute is greater than its end minute spans
midnight. Its late part (00:00 up to and including 05:00) is looked up on the
previous day's row, so a Saturday 20:00-04:00 window is open on Sunday 03:00.
Every other time is checked against the same day's row, bounds inclusive.
"""
from datetime import time

from sqlalchemy import and_, or_

from open_hours.constants import EARLY_MORNING_END_MINUTE
from open_hours.schedule import DayOfWeek, WeeklySchedule, minute_of_day


def _all(*conditions):
    return all(conditions)


def _any(*conditions):
    return any(conditions)


def _same_day(day: DayOfWeek):
    return day


def is_early_morning(minute: int) -> bool:
    return 0 <= minute <= EARLY_MORNING_END_MINUTE


def open_window_predicate(day, start, end, query_day: DayOfWeek, minute: int,
                          conjunction=_all, disjunction=_any, day_value=_same_day):
    """Whether an interval row ``(day, start, end)`` is open at ``(query_day, minute)``.

    ``day``, ``start`` and ``end`` may be plain values or SQL columns; the
    combinators and ``day_value`` adapt the result to the caller's backend.
    """
    if is_early_morning(minute):
        return conjunction(
            day == day_value(query_day.minus(1)),
            start > end,
            disjunction(start <= minute, end >= minute),
        )

    return conjunction(
        day == day_value(query_day),
        start <= minute,
        end >= minute,
    )


def is_open(schedule: WeeklySchedule, day: DayOfWeek, time_of_day: time) -> bool:
    """Check if a schedule is open on a given day of week and time of day."""
    minute = minute_of_day(time_of_day)
    return any(
        open_window_predicate(interval_day, open_hours.start_minute, open_hours.end_minute, day, minute)
        for interval_day, open_hours in schedule.items()
    )


def open_window_clause(day_column, start_column, end_column, query_day: DayOfWeek, minute: int):
    """SQLAlchemy clause for interval rows open at ``(query_day, minute)``."""
    return open_window_predicate(
        day_column, start_column, end_column, query_day, minute,
        conjunction=and_, disjunction=or_, day_value=lambda day: day.name
    )


# Expects the interval table aliased as "oh"; see open_window_params
OPEN_WINDOW_SQL = """
    (:minute <= :early_morning_end
        AND oh.day_of_week = :previous_day
        AND oh.start_time_minute_of_day > oh.end_time_minute_of_day
        AND (oh.start_time_minute_of_day <= :minute OR oh.end_time_minute_of_day >= :minute))
    OR (:minute > :early_morning_end
        AND oh.day_of_week = :day
        AND oh.start_time_minute_of_day <= :minute
        AND oh.end_time_minute_of_day >= :minute)
"""


def open_window_params(query_day: DayOfWeek, minute: int) -> dict:
    return {
        'day': query_day.name,
        'previous_day': query_day.minus(1).name,
        'minute': minute,
        'early_morning_end': EARLY_MORNING_END_MINUTE,
    }
