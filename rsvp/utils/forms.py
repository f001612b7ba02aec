"""
URL-encoded form decoding for the POST routes
"""

from typing import List, Tuple

from fastapi import Request

from rsvp.schemas.event import EventCreate
from rsvp.schemas.interest import InterestRequest
from rsvp.utils.errors import MalformedInputError, MissingFieldError

FormItems = List[Tuple[str, str]]

EVENT_CHECKBOX_PREFIX = "event-"
EVENT_CREATE_FIELDS = ("title", "link", "date_time", "description", "password")

async def read_form(request: Request) -> FormItems:
    """Decode the request body into (key, value) pairs in input order"""
    try:
        form = await request.form()
    except Exception as e:
        raise MalformedInputError("could not decode form body") from e
    return [(key, value) for key, value in form.multi_items() if isinstance(value, str)]

def is_checked(value: str) -> bool:
    """Form booleans are true only for the literal string "true" """
    return value == "true"

def parse_interest_form(items: FormItems) -> InterestRequest:
    fields = dict(items)
    if "name" not in fields:
        raise MissingFieldError(["name"])

    event_uuids: List[str] = []
    if fields.get("event_uuid"):
        event_uuids.append(fields["event_uuid"])
    for key, value in items:
        if key.startswith(EVENT_CHECKBOX_PREFIX) and is_checked(value):
            event_uuid = key[len(EVENT_CHECKBOX_PREFIX):]
            if event_uuid not in event_uuids:
                event_uuids.append(event_uuid)
    if not event_uuids:
        raise MissingFieldError(["event_uuid"])

    return InterestRequest(
        name=fields["name"],
        show_name=is_checked(fields.get("show_name", "")),
        event_uuids=event_uuids,
    )

def parse_event_form(items: FormItems) -> EventCreate:
    fields = dict(items)
    missing = [field for field in EVENT_CREATE_FIELDS if field not in fields]
    if missing:
        raise MissingFieldError(missing)
    return EventCreate(**{field: fields[field] for field in EVENT_CREATE_FIELDS})
