"""
Database engine, session factory and the per-request session dependency
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from rsvp.core.config import settings
from rsvp.utils.errors import DatabaseConnectionError

logger = logging.getLogger(__name__)

engine = create_engine(settings.database_url, connect_args={"check_same_thread": False})
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    """Open one session for the request and close it afterwards"""
    db = SessionLocal()
    try:
        try:
            db.connection()
        except SQLAlchemyError as e:
            logger.error(f"Could not connect to {settings.database_url}: {e}")
            raise DatabaseConnectionError() from e
        yield db
    finally:
        db.close()
