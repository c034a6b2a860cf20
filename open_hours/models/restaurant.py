from open_hours.db import Base
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship


class Restaurant(Base):
    __tablename__ = 'restaurants'

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)

    open_hours = relationship(
        'OpenHour', back_populates='restaurant', cascade='all, delete-orphan',
        order_by='OpenHour.id'
    )
