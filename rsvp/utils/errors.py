"""
Error taxonomy shared by handlers, services and repositories.

Every failure a request can end in is one of the ``RsvpError`` subclasses
below. Each carries the HTTP status it maps to and a user-facing message;
``status_for`` is the only place a status code is chosen.
"""

from typing import Iterable, List

from fastapi import status

class RsvpError(Exception):
    """Base error with a user-safe message"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

class EventNotFoundError(RsvpError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, event_uuid: str):
        super().__init__(f"Event not found: {event_uuid}")
        self.event_uuid = event_uuid

class MissingFieldError(RsvpError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, fields: Iterable[str]):
        self.fields: List[str] = list(fields)
        suffix = "" if len(self.fields) == 1 else "s"
        super().__init__(f"Missing field{suffix}: {', '.join(self.fields)}")

class MalformedInputError(RsvpError):
    """Input that was present but could not be decoded (bad UUID, bad body)"""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(f"Malformed input: {detail}")

class WrongPasswordError(RsvpError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self):
        super().__init__("Wrong password")

class MailError(RsvpError):
    def __init__(self):
        super().__init__("Error occurred sending email")

class TemplateNotFoundError(RsvpError):
    def __init__(self, template_name: str):
        super().__init__(f"Template not found: {template_name}")
        self.template_name = template_name

class TemplateRenderError(RsvpError):
    def __init__(self):
        super().__init__("Template rendering error")

class DatabaseConnectionError(RsvpError):
    def __init__(self):
        super().__init__("Database connection error")

class DatabaseError(RsvpError):
    def __init__(self):
        super().__init__("Database error")

class UnexpectedError(RsvpError):
    def __init__(self):
        super().__init__("Unexpected error")

def status_for(error: Exception) -> int:
    """Map any exception to the HTTP status it is reported with"""
    if isinstance(error, RsvpError):
        return error.status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR
