"""
Event viewing, interest registration and event creation
"""

import logging
import uuid
from typing import List

from sqlalchemy.orm import Session

from rsvp.core.config import Settings
from rsvp.models import Event
from rsvp.schemas.event import EventCreate, EventView, InterestedParties
from rsvp.schemas.interest import InterestRequest
from rsvp.services.mail_service import MailService
from rsvp.services.repositories import EventRepo, InterestedPersonRepo
from rsvp.utils.errors import MalformedInputError, MissingFieldError
from rsvp.utils.security import verify_insert_password

logger = logging.getLogger(__name__)

def parse_event_uuid(raw: str) -> str:
    """Canonical (lowercase, hyphenated) form of a UUID string"""
    try:
        return str(uuid.UUID(raw.strip()))
    except ValueError as e:
        raise MalformedInputError(f"invalid event id {raw!r}") from e

def parse_event_uuids(raw: str) -> List[str]:
    """Split a comma-separated path segment into canonical UUIDs"""
    if not raw.strip():
        raise MissingFieldError(["event id"])
    return [parse_event_uuid(part) for part in raw.split(",")]

class EventService:
    """Business logic behind the public and admin routes"""

    @staticmethod
    def build_view(db: Session, event: Event) -> EventView:
        persons = InterestedPersonRepo.list_for_event(db, event.id)
        return EventView(
            uuid=event.uuid,
            title=event.title,
            link=event.link,
            date_time=event.date_time,
            description=event.description,
            interested_parties=InterestedParties.from_persons(persons),
        )

    @staticmethod
    def get_event_views(db: Session, event_uuids: List[str]) -> List[EventView]:
        """Load every requested event; one unknown UUID fails the whole batch"""
        return [
            EventService.build_view(db, EventRepo.get_by_uuid(db, event_uuid))
            for event_uuid in event_uuids
        ]

    @staticmethod
    async def register_interest(db: Session, mailer: MailService, request: InterestRequest) -> List[str]:
        """Record interest in each target event and notify the organiser.

        Events are handled one at a time in request order; the same event
        named twice is registered once. A failure stops processing; rows written for earlier events stay committed.
        """
        registered = []
        for raw_uuid in request.event_uuids:
            event_uuid = parse_event_uuid(raw_uuid)
            if event_uuid in registered:
                continue
            event = EventRepo.get_by_uuid(db, event_uuid)
            InterestedPersonRepo.create(db, event.id, request.name, request.show_name)
            logger.info(f"Registered interest in {event_uuid} (displayed={request.show_name})")

            await mailer.send_interest_notification(request.name, event.title, event_uuid)
            registered.append(event_uuid)
        return registered

    @staticmethod
    def create_event(db: Session, settings: Settings, data: EventCreate) -> str:
        """Create an event if the shared password matches; returns its UUID"""
        verify_insert_password(data.password, settings)

        event_uuid = str(uuid.uuid4())
        EventRepo.create(
            db,
            event_uuid=event_uuid,
            title=data.title,
            link=data.link,
            date_time=data.date_time,
            description=data.description,
        )
        logger.info(f"Created event {event_uuid}: {data.title}")
        return event_uuid
