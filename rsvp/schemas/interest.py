"""
Interest registration schemas
"""

from typing import List
from pydantic import BaseModel

__all__ = ["InterestRequest"]

class InterestRequest(BaseModel):
    """Decoded body of POST /interested"""
    name: str
    show_name: bool = False
    event_uuids: List[str]
