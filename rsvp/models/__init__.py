"""
Database models package
"""

from .event import Event
from .interested_person import InterestedPerson

__all__ = ["Event", "InterestedPerson"]
