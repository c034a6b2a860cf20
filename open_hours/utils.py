import os
import logging
from datetime import datetime, time
from typing import Iterable, List, Tuple

import pytz

from open_hours.constants import DEFAULT_TIMEZONE
from open_hours.db import Session
from open_hours.models import OpenHour, Restaurant as RestaurantModel
from open_hours.schedule import DayOfWeek, Restaurant, minute_of_day

logger = logging.getLogger(__name__)


def get_local_timezone():
    return pytz.timezone(os.getenv('LOCAL_TIMEZONE', DEFAULT_TIMEZONE))


def split_timestamp(timestamp: datetime, timezone=None) -> Tuple[DayOfWeek, time]:
    """Day of week and time of day of a timestamp in restaurant local time.

    Naive timestamps are already local wall clock time; aware ones are
    converted to the local timezone first.
    """
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(timezone or get_local_timezone())
    return DayOfWeek.from_datetime(timestamp), timestamp.time()


def restaurant_to_record(restaurant: Restaurant) -> RestaurantModel:
    """Convert a parsed restaurant into a restaurants row with its open_hours rows."""
    return RestaurantModel(
        name=restaurant.name,
        open_hours=[
            OpenHour(
                day_of_week=day_of_week.name,
                start_time_minute_of_day=minute_of_day(open_hours.start_time),
                end_time_minute_of_day=minute_of_day(open_hours.end_time)
            )
            for day_of_week, open_hours in sorted(restaurant.open_hours.items())
        ]
    )


def seed_restaurants(db: Session, restaurants: Iterable[Restaurant]) -> List[RestaurantModel]:
    """Insert parsed restaurants and their open hours in a single commit."""
    records = [restaurant_to_record(restaurant) for restaurant in restaurants]
    db.add_all(records)
    db.commit()

    logger.info(f"Inserted {len(records)} restaurants")
    return records
