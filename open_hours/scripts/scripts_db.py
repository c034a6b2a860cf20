from contextlib import contextmanager
from open_hours.db import Session
from sqlalchemy.exc import SQLAlchemyError


@contextmanager
def get_scripts_db(session_factory=Session):
    db = session_factory()
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise e
    finally:
        db.close()
