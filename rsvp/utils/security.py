"""
Shared-password check for event creation
"""

from rsvp.core.config import Settings
from rsvp.utils.errors import WrongPasswordError

def verify_insert_password(password: str, settings: Settings) -> None:
    """Exact string comparison against the configured insert password"""
    if password != settings.INSERT_PASSWORD:
        raise WrongPasswordError()
