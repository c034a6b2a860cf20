import sys
import logging

from open_hours.db import Base, Session, engine
from open_hours.models import Restaurant
from open_hours.scripts.scripts_db import get_scripts_db
from open_hours.services.csv_restaurant_service import DEFAULT_CSV_PATH, read_restaurant_chunks
from open_hours.utils import seed_restaurants

logger = logging.getLogger(__name__)


def load_restaurant_hours(csv_file_path=DEFAULT_CSV_PATH, session_factory=Session) -> int:
    """Insert every parsable restaurant of the CSV, committing once per chunk.

    Nothing is inserted when the restaurants table already has rows.
    """
    inserted = 0
    with get_scripts_db(session_factory) as session:
        if session.query(Restaurant).count() > 0:
            logger.info("Restaurants already loaded, no need to insert data")
            return inserted

        for restaurants in read_restaurant_chunks(csv_file_path):
            inserted += len(seed_restaurants(session, restaurants))
    return inserted


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    Base.metadata.create_all(bind=engine)

    csv_file_path = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_CSV_PATH
    count = load_restaurant_hours(csv_file_path)

    print(f"Inserted {count} restaurants into restaurants and open_hours tables successfully.")
