import logging
from datetime import datetime, time
from pathlib import Path
from typing import Iterable, Iterator, List

import pandas as pd

from open_hours.constants import BATCH_SIZE, RESTAURANT_HOURS_CSV
from open_hours.open_window import is_open
from open_hours.schedule import DayOfWeek, Restaurant, parse_restaurant
from open_hours.utils import split_timestamp

logger = logging.getLogger(__name__)

DEFAULT_CSV_PATH = Path(__file__).resolve().parent.parent / 'data' / RESTAURANT_HOURS_CSV


def read_restaurant_chunks(csv_file_path=DEFAULT_CSV_PATH, batch_size: int = BATCH_SIZE) -> Iterator[List[Restaurant]]:
    """Yield the parsable restaurants of a ``name,schedule`` CSV, one list per chunk."""
    chunks = pd.read_csv(
        csv_file_path, header=None, names=['name', 'open_hours'], dtype=str,
        keep_default_na=False, chunksize=batch_size
    )
    for chunk in chunks:
        restaurants = []
        for row in chunk.itertuples(index=False):
            restaurant = parse_restaurant(tuple(row))
            if restaurant is not None:
                restaurants.append(restaurant)
        yield restaurants


class CSVRestaurantService:
    """Open restaurant lookups over schedules held in memory."""

    def __init__(self, restaurants: Iterable[Restaurant]):
        self.restaurant_list = list(restaurants)

    @classmethod
    def from_csv(cls, csv_file_path=DEFAULT_CSV_PATH) -> 'CSVRestaurantService':
        restaurants = [restaurant for chunk in read_restaurant_chunks(csv_file_path) for restaurant in chunk]
        logger.info(f"Loaded {len(restaurants)} restaurants from {csv_file_path}")
        return cls(restaurants)

    def get_all_restaurants(self) -> List[Restaurant]:
        return self.restaurant_list

    def get_open_restaurants(self, day_of_week: DayOfWeek, local_time: time) -> List[Restaurant]:
        return [
            restaurant for restaurant in self.restaurant_list
            if is_open(restaurant.open_hours, day_of_week, local_time)
        ]

    def get_open_restaurants_at(self, timestamp: datetime) -> List[Restaurant]:
        return self.get_open_restaurants(*split_timestamp(timestamp))
