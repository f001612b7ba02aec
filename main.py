"""
Event RSVP - FastAPI application
Main application entry point
"""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
import uvicorn

from rsvp.core.config import settings
from rsvp.core.db import engine, Base
from rsvp.api import routes_admin, routes_public
from rsvp.services.mail_service import close_http_client
from rsvp.utils.errors import RsvpError
from rsvp.utils.responses import rsvp_error_handler, unexpected_error_handler

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    # Create database tables
    Base.metadata.create_all(bind=engine)
    logger.info(f"Database tables ready at {settings.DB_PATH}")
    yield
    await close_http_client()
    logger.info("Application shutdown")

# Create FastAPI application
app = FastAPI(
    title="Event RSVP",
    description="Publish events and collect interest registrations",
    version="1.0.0",
    lifespan=lifespan
)

app.add_exception_handler(RsvpError, rsvp_error_handler)
app.add_exception_handler(Exception, unexpected_error_handler)

# Mount static files
os.makedirs(settings.STATIC_DIR, exist_ok=True)
app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")

# Include routers; /event/create must win over /event/{event_uuids}
app.include_router(routes_admin.router, tags=["admin"])
app.include_router(routes_public.router, tags=["public"])

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.BIND_ADDRESS,
        port=settings.PORT
    )
