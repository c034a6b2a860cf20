from open_hours.models.restaurant import Restaurant
from open_hours.models.open_hour import OpenHour

__all__ = ['Restaurant', 'OpenHour']
