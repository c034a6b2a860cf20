import logging
from collections import namedtuple
from datetime import datetime, time
from typing import Collection, List

from sqlalchemy import bindparam, text

from open_hours.db import Session
from open_hours.open_window import OPEN_WINDOW_SQL, open_window_params
from open_hours.schedule import DayOfWeek, minute_of_day
from open_hours.utils import split_timestamp

logger = logging.getLogger(__name__)

RestaurantRecord = namedtuple('RestaurantRecord', ['id', 'name'])

OPEN_RESTAURANTS_QUERY = text(f"""
    SELECT DISTINCT r.id, r.name
    FROM restaurants r
    INNER JOIN open_hours oh ON oh.restaurant_id = r.id
    WHERE {OPEN_WINDOW_SQL}
    ORDER BY r.id
""")

RESTAURANTS_WITH_IDS_QUERY = text(
    "SELECT r.id, r.name FROM restaurants r WHERE r.id IN :ids ORDER BY r.id"
).bindparams(bindparam('ids', expanding=True))


class SQLRestaurantService:
    """Open restaurant lookups through hand-written parameterized SQL."""

    def __init__(self, db: Session):
        self.db = db

    def _fetch_records(self, query, params: dict) -> List[RestaurantRecord]:
        return [RestaurantRecord(row.id, row.name) for row in self.db.execute(query, params)]

    def get_open_restaurants(self, day_of_week: DayOfWeek, local_time: time) -> List[RestaurantRecord]:
        params = open_window_params(day_of_week, minute_of_day(local_time))
        logger.debug(f"Open restaurants query parameters: {params}")
        return self._fetch_records(OPEN_RESTAURANTS_QUERY, params)

    def get_open_restaurants_at(self, timestamp: datetime) -> List[RestaurantRecord]:
        return self.get_open_restaurants(*split_timestamp(timestamp))

    def get_all_restaurant_records_with_ids(self, ids: Collection[int]) -> List[RestaurantRecord]:
        if not ids:
            return []
        return self._fetch_records(RESTAURANTS_WITH_IDS_QUERY, {'ids': list(ids)})
