from datetime import datetime, time
from typing import List

from open_hours.db import Session
from open_hours.models import OpenHour, Restaurant
from open_hours.open_window import open_window_clause
from open_hours.schedule import DayOfWeek, minute_of_day
from open_hours.utils import split_timestamp


class ORMRestaurantService:
    """Open restaurant lookups through the SQLAlchemy query builder."""

    def __init__(self, db: Session):
        self.db = db

    def get_open_restaurants(self, day_of_week: DayOfWeek, local_time: time) -> List[Restaurant]:
        return self.db.query(Restaurant).join(Restaurant.open_hours).filter(
            open_window_clause(
                OpenHour.day_of_week,
                OpenHour.start_time_minute_of_day,
                OpenHour.end_time_minute_of_day,
                day_of_week,
                minute_of_day(local_time)
            )
        ).distinct().order_by(Restaurant.id).all()

    def get_open_restaurants_at(self, timestamp: datetime) -> List[Restaurant]:
        return self.get_open_restaurants(*split_timestamp(timestamp))

    def get_restaurant(self, restaurant_id: int):
        return self.db.query(Restaurant).filter(Restaurant.id == restaurant_id).first()
