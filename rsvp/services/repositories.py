"""
Repository layer over the SQLAlchemy session.

Every call takes the request's session explicitly. Lookups that find nothing
raise ``EventNotFoundError``; any other SQLAlchemy failure is reported as
``DatabaseError``. Inserts commit on their own.
"""

from __future__ import annotations

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rsvp.models import Event, InterestedPerson
from rsvp.utils.errors import DatabaseError, EventNotFoundError

logger = logging.getLogger(__name__)


def _commit(db: Session, instance):
    try:
        db.add(instance)
        db.commit()
        db.refresh(instance)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Insert into {instance.__tablename__} failed: {e}")
        raise DatabaseError() from e
    return instance


# -------- Event repository --------

class EventRepo:
    @staticmethod
    def get_by_uuid(db: Session, event_uuid: str) -> Event:
        try:
            event = db.query(Event).filter(Event.uuid == event_uuid).first()
        except SQLAlchemyError as e:
            logger.error(f"Event lookup for {event_uuid} failed: {e}")
            raise DatabaseError() from e
        if event is None:
            raise EventNotFoundError(event_uuid)
        return event

    @staticmethod
    def create(db: Session, event_uuid: str, title: str, link: str, date_time: str, description: str) -> Event:
        event = Event(uuid=event_uuid, title=title, link=link, date_time=date_time, description=description)
        return _commit(db, event)


# -------- InterestedPerson repository --------

class InterestedPersonRepo:
    @staticmethod
    def list_for_event(db: Session, event_id: int) -> List[InterestedPerson]:
        try:
            return db.query(InterestedPerson).filter(
                InterestedPerson.event_id == event_id
            ).order_by(InterestedPerson.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Loading interested persons for event {event_id} failed: {e}")
            raise DatabaseError() from e

    @staticmethod
    def create(db: Session, event_id: int, name: str, displayed: bool) -> InterestedPerson:
        person = InterestedPerson(event_id=event_id, name=name, displayed=displayed)
        return _commit(db, person)
