"""
Admin routes - event creation behind the shared insert password
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from rsvp.core.config import Settings, get_settings
from rsvp.core.db import get_db
from rsvp.services.event_service import EventService
from rsvp.services.renderer import PageRenderer, get_renderer
from rsvp.utils.forms import parse_event_form, read_form
from rsvp.utils.responses import html_response, redirect_to_events

router = APIRouter()

@router.get("/event/create")
async def create_event_page(renderer: PageRenderer = Depends(get_renderer)):
    """Serve the create-event form"""
    return html_response(renderer.render("create.html", {}))

@router.post("/event/create")
async def create_event(
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Create a new event and redirect to its page"""
    event_data = parse_event_form(await read_form(request))
    event_uuid = EventService.create_event(db, settings, event_data)
    return redirect_to_events([event_uuid])
