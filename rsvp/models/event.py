"""
Event model
"""

from sqlalchemy import Column, Integer, String, Text

from rsvp.core.db import Base

class Event(Base):
    __tablename__ = "events"
    
    id = Column(Integer, primary_key=True, index=True)
    uuid = Column(String(36), unique=True, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    link = Column(String(2048), nullable=False)
    description = Column(Text, nullable=False)
    date_time = Column(String(255), nullable=False)  # opaque, never parsed
