import logging
from datetime import datetime
from time import time as time2
from typing import List

from fastapi import APIRouter, status, Depends
from fastapi.exceptions import HTTPException

from open_hours.db import Session
from open_hours.dependencies import get_db
from open_hours.schemas import OpenAtQuery, RestaurantOpenHoursOut, RestaurantOut
from open_hours.services.orm_restaurant_service import ORMRestaurantService

logger = logging.getLogger(__name__)

app_router = APIRouter(
    prefix=''
)


@app_router.get("/open_restaurants", status_code=status.HTTP_200_OK, response_model=List[RestaurantOut])
async def get_open_restaurants(day: str, time: str, db: Session = Depends(get_db)):
    query = OpenAtQuery.from_params(day, time)

    start = time2()
    restaurants = ORMRestaurantService(db).get_open_restaurants(query.day_of_week, query.local_time)
    logger.info(f"Found {len(restaurants)} open restaurants for {query.day_of_week.name} {query.local_time} "
                f"in {time2() - start} seconds")

    return restaurants


@app_router.get("/open_restaurants/at", status_code=status.HTTP_200_OK, response_model=List[RestaurantOut])
async def get_open_restaurants_at(timestamp: datetime, db: Session = Depends(get_db)):
    return ORMRestaurantService(db).get_open_restaurants_at(timestamp)


@app_router.get("/restaurants/{restaurant_id}/open_hours", status_code=status.HTTP_200_OK,
                response_model=RestaurantOpenHoursOut)
async def get_restaurant_open_hours(restaurant_id: int, db: Session = Depends(get_db)):
    restaurant = ORMRestaurantService(db).get_restaurant(restaurant_id)
    if not restaurant:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Restaurant not found."
        )
    return restaurant
