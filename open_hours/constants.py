DEFAULT_TIMEZONE = 'America/Chicago'

DEFAULT_DATABASE_URI = 'sqlite:///./open_hours.db'

# Up to 05:00 (inclusive) a query time belongs to the previous day's late window
EARLY_MORNING_END_MINUTE = 5 * 60
MINUTES_PER_DAY = 24 * 60

TIME_FORMAT = '%H:%M'

GROUP_SEPARATOR = ';'
DAYS_SEPARATOR = '|'
DAY_SEPARATOR = ','
TIME_SEPARATOR = '-'

RESTAURANT_HOURS_CSV = 'rest_hours.csv'
BATCH_SIZE = 10000
