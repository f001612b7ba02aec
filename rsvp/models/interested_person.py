"""
InterestedPerson model
"""

from sqlalchemy import Column, Integer, String, Boolean, ForeignKey

from rsvp.core.db import Base

class InterestedPerson(Base):
    __tablename__ = "interested_persons"
    
    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    displayed = Column("show_name", Boolean, nullable=False, default=False)
