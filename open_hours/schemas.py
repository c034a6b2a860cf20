from datetime import time
from typing import List

from fastapi import HTTPException, status
from pydantic import BaseModel, ConfigDict

from open_hours.schedule import DayOfWeek, MalformedScheduleError, parse_time_of_day


class RestaurantOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class OpenHourOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    day_of_week: str
    start_time_minute_of_day: int
    end_time_minute_of_day: int


class RestaurantOpenHoursOut(RestaurantOut):
    open_hours: List[OpenHourOut]


class OpenAtQuery(BaseModel):
    day_of_week: DayOfWeek
    local_time: time

    @classmethod
    def validate_day_of_week(cls, day: str) -> DayOfWeek:
        normalized = day.strip().upper()
        if normalized in DayOfWeek.__members__:
            return DayOfWeek[normalized]

        day_of_week = DayOfWeek.from_abbreviation(day.strip().title())
        if day_of_week is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid day. Must be a day name such as SUNDAY or Sun."
            )
        return day_of_week

    @classmethod
    def validate_local_time(cls, local_time: str) -> time:
        try:
            return parse_time_of_day(local_time)
        except MalformedScheduleError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid time. Must be a 24-hour HH:MM time."
            )

    @classmethod
    def from_params(cls, day: str, local_time: str) -> 'OpenAtQuery':
        return cls(
            day_of_week=cls.validate_day_of_week(day),
            local_time=cls.validate_local_time(local_time)
        )
