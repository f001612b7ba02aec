"""
Public routes - event pages and interest registration
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from rsvp.core.config import Settings, get_settings
from rsvp.core.db import get_db
from rsvp.services.event_service import EventService, parse_event_uuids
from rsvp.services.mail_service import MailService, get_mail_service
from rsvp.services.renderer import PageRenderer, get_renderer
from rsvp.utils.forms import parse_interest_form, read_form
from rsvp.utils.responses import html_response, redirect_to_events

router = APIRouter()

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}

@router.get("/")
async def index(
    settings: Settings = Depends(get_settings),
    renderer: PageRenderer = Depends(get_renderer)
):
    """Organiser landing page"""
    body = renderer.render("index.html", {"organiser_name": settings.ORGANISER_NAME})
    return html_response(body)

@router.get("/event/{event_uuids}")
@router.get("/events/{event_uuids}")
async def serve_events(
    event_uuids: str,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    renderer: PageRenderer = Depends(get_renderer)
):
    """One event page, or a combined page for comma-separated UUIDs"""
    views = EventService.get_event_views(db, parse_event_uuids(event_uuids))

    if len(views) == 1:
        body = renderer.render("event.html", {
            "organiser_name": settings.ORGANISER_NAME,
            "event": views[0]
        })
    else:
        body = renderer.render("events.html", {
            "organiser_name": settings.ORGANISER_NAME,
            "events": views
        })
    return html_response(body)

@router.post("/interested")
async def mark_interested(
    request: Request,
    db: Session = Depends(get_db),
    mailer: MailService = Depends(get_mail_service)
):
    """Register interest in one or more events, then show them"""
    interest = parse_interest_form(await read_form(request))
    registered = await EventService.register_interest(db, mailer, interest)
    return redirect_to_events(registered)
