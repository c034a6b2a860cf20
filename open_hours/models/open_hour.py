from open_hours.db import Base
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship


class OpenHour(Base):
    __tablename__ = 'open_hours'

    id = Column(Integer, primary_key=True, index=True)
    restaurant_id = Column(Integer, ForeignKey('restaurants.id', ondelete='CASCADE'), nullable=False, index=True)
    day_of_week = Column(String, nullable=False)  # DayOfWeek name, MONDAY..SUNDAY
    start_time_minute_of_day = Column(Integer, nullable=False)  # 0..1439
    end_time_minute_of_day = Column(Integer, nullable=False)  # less than start when spanning midnight

    restaurant = relationship('Restaurant', back_populates='open_hours')
