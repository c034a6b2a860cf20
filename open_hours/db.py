from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from dotenv import load_dotenv
import os

from open_hours.constants import DEFAULT_DATABASE_URI

# Specify the path to your .env file
dotenv_path = os.path.join(os.path.dirname(__file__), '..', '.env')
load_dotenv(dotenv_path)

DATABASE_URI = os.getenv("DATABASE_URI", DEFAULT_DATABASE_URI)
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
engine = create_engine(DATABASE_URI, echo=SQL_ECHO)

Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()
