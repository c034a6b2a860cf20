import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from open_hours.db import Base, engine
from open_hours.routes import app_router

# Configure logging
logging.basicConfig(level=logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title="Restaurant Open Hours", lifespan=lifespan)
app.include_router(app_router)
