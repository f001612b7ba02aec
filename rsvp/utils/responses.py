"""
Standardized response utilities
"""

import logging
from typing import Iterable

from fastapi import Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from rsvp.utils.errors import RsvpError, UnexpectedError, status_for

logger = logging.getLogger(__name__)

def html_response(body: bytes, status_code: int = 200) -> HTMLResponse:
    """Wrap rendered page bytes"""
    return HTMLResponse(content=body, status_code=status_code)

def error_response(error: RsvpError) -> PlainTextResponse:
    """Render an error as a plain-text ``Error: <message>`` body"""
    return PlainTextResponse(
        content=f"Error: {error}",
        status_code=status_for(error)
    )

def redirect_to_events(event_uuids: Iterable[str]) -> RedirectResponse:
    """303 redirect to the detail page of one event, or the batch page of several"""
    event_uuids = list(event_uuids)
    if len(event_uuids) == 1:
        url = f"/event/{event_uuids[0]}"
    else:
        url = f"/events/{','.join(event_uuids)}"
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)

async def rsvp_error_handler(request: Request, exc: RsvpError) -> PlainTextResponse:
    """Exception handler for the closed error taxonomy"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc!r}", exc_info=exc.__cause__)
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return error_response(exc)

async def unexpected_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Exception handler for anything outside the taxonomy"""
    logger.exception(f"{request.method} {request.url.path} raised an unexpected error", exc_info=exc)
    return error_response(UnexpectedError())
