"""
Pydantic schemas package
"""

from .event import *
from .interest import *

__all__ = [
    "EventCreate",
    "EventView",
    "InterestedParties",
    "InterestRequest",
]
