import logging
from dataclasses import dataclass
from datetime import datetime, time
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from open_hours.constants import (
    DAY_SEPARATOR, DAYS_SEPARATOR, GROUP_SEPARATOR, TIME_FORMAT, TIME_SEPARATOR
)

logger = logging.getLogger(__name__)


class MalformedScheduleError(ValueError):
    """Raised when a schedule group cannot describe an open interval."""


InvalidScheduleError = MalformedScheduleError


class DayOfWeek(IntEnum):
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    def minus(self, days: int) -> 'DayOfWeek':
        return DayOfWeek((self - days) % 7)

    @property
    def abbreviation(self) -> str:
        return self.name[:3].title()

    @classmethod
    def from_abbreviation(cls, token: str) -> Optional['DayOfWeek']:
        return _DAYS_BY_ABBREVIATION.get(token)

    @classmethod
    def from_datetime(cls, timestamp: datetime) -> 'DayOfWeek':
        return cls(timestamp.weekday())


_DAYS_BY_ABBREVIATION = {day.abbreviation: day for day in DayOfWeek}


def parse_time_of_day(value: str) -> time:
    """Parse a 24-hour ``H:MM``/``HH:MM`` literal, ``0:00`` included."""
    hours, _, minutes = value.partition(":")
    if not 1 <= len(hours) <= 2 or len(minutes) != 2:
        raise MalformedScheduleError(f"Invalid time of day: {value!r}")

    try:
        return datetime.strptime(value, TIME_FORMAT).time()
    except ValueError:
        raise MalformedScheduleError(f"Invalid time of day: {value!r}")


def minute_of_day(value: time) -> int:
    return value.hour * 60 + value.minute


@dataclass(frozen=True)
class OpenHours:
    start_time: time
    end_time: time

    @property
    def start_minute(self) -> int:
        return minute_of_day(self.start_time)

    @property
    def end_minute(self) -> int:
        return minute_of_day(self.end_time)


WeeklySchedule = Mapping[DayOfWeek, OpenHours]


@dataclass(frozen=True)
class Restaurant:
    name: str
    open_hours: WeeklySchedule


def _parse_group(group: str) -> tuple:
    days, separator, hours = group.partition(DAYS_SEPARATOR)
    if not separator:
        raise MalformedScheduleError(f"Missing '{DAYS_SEPARATOR}' in group {group!r}")

    start_text, separator, end_text = hours.partition(TIME_SEPARATOR)
    if not separator:
        raise MalformedScheduleError(f"Missing '{TIME_SEPARATOR}' in hours {hours!r}")
    if start_text == end_text:
        raise MalformedScheduleError("Start time and end time are same")

    open_hours = OpenHours(parse_time_of_day(start_text), parse_time_of_day(end_text))
    if open_hours.start_time == open_hours.end_time:
        raise MalformedScheduleError("Start time and end time are same")

    return days.split(DAY_SEPARATOR), open_hours


def parse_open_hours(open_hours_string: str) -> WeeklySchedule:
    """Parse a schedule such as ``Mon,Tue|11:00-22:00;Fri,Sat|11:00-0:00``.

    ``;`` separates groups, ``|`` separates the day list from the hours span.
    Unknown day tokens are skipped; a day listed again in a later group takes
    that group's hours. Raises MalformedScheduleError when a group has no
    hours span, an unparsable time, or the same start and end time.
    """
    schedule = {}
    for group in open_hours_string.split(GROUP_SEPARATOR):
        if not group:
            continue

        day_tokens, open_hours = _parse_group(group)
        for token in day_tokens:
            day = DayOfWeek.from_abbreviation(token)
            if day is None:
                logger.debug(f"Skipping unknown day token {token!r}")
                continue
            schedule[day] = open_hours

    return MappingProxyType(schedule)


def parse_restaurant(record: Sequence) -> Optional[Restaurant]:
    """Build a Restaurant from a ``(name, schedule text)`` record.

    Returns None when either column is missing or the schedule is malformed,
    so that one bad line never yields a partially populated restaurant.
    """
    try:
        name, open_hours_string = record[0], record[1]
    except IndexError:
        logger.warning(f"Dropping record with missing columns: {record!r}")
        return None

    if (not isinstance(name, str) or not name or not isinstance(open_hours_string, str)
            or not open_hours_string):
        logger.warning(f"Dropping record with empty columns: {record!r}")
        return None

    try:
        return Restaurant(name, parse_open_hours(open_hours_string))
    except MalformedScheduleError as e:
        logger.warning(f"Dropping restaurant {name!r}: {e}")
        return None
