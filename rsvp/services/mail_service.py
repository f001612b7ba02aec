"""
Organiser notifications through the Mailgun HTTP API
"""

import logging
from functools import lru_cache

import httpx
from fastapi import Depends

from rsvp.core.config import Settings, get_settings
from rsvp.utils.errors import MailError

logger = logging.getLogger(__name__)

class MailService:
    """Sends one notification email per interest registration"""

    def __init__(self, settings: Settings, client: httpx.AsyncClient):
        self.settings = settings
        self.client = client

    @property
    def messages_url(self) -> str:
        return f"{self.settings.MAILGUN_API_BASE}/{self.settings.HOST}/messages"

    async def send_interest_notification(self, name: str, event_title: str, event_uuid: str) -> None:
        """Tell the organiser that ``name`` is interested in an event"""
        data = {
            "from": self.settings.mail_sender,
            "to": self.settings.NOTIFY_EMAIL,
            "subject": f"Someone is interested in {event_title}",
            "text": f"{name} is interested in {event_title}: {event_uuid}",
        }
        try:
            response = await self.client.post(
                self.messages_url,
                auth=("api", self.settings.MAILGUN_API_KEY),
                data=data,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Mailgun notification for event {event_uuid} failed: {e}")
            raise MailError() from e

        logger.info(f"Notified {self.settings.NOTIFY_EMAIL} about interest in {event_uuid}")

@lru_cache(maxsize=1)
def get_http_client() -> httpx.AsyncClient:
    """Process-wide HTTP client, reused across requests"""
    return httpx.AsyncClient()

async def close_http_client() -> None:
    if get_http_client.cache_info().currsize:
        await get_http_client().aclose()
        get_http_client.cache_clear()

def get_mail_service(
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client)
) -> MailService:
    return MailService(settings, client)
