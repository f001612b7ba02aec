"""
Event-related Pydantic schemas
"""

from typing import List
from pydantic import BaseModel

__all__ = ["EventCreate", "EventView", "InterestedParties"]

class EventCreate(BaseModel):
    """Fields of the create-event form"""
    title: str
    link: str
    date_time: str
    description: str
    password: str

class InterestedParties(BaseModel):
    """Summary of who registered interest in an event"""
    named: List[str] = []
    unnamed: int = 0
    any_interested: bool = False
    unnamed_plurality: str = "people"

    @classmethod
    def from_persons(cls, persons) -> "InterestedParties":
        """Split persons into displayed names and an anonymous count"""
        named = [person.name for person in persons if person.displayed]
        unnamed = sum(1 for person in persons if not person.displayed)
        return cls(
            named=named,
            unnamed=unnamed,
            any_interested=bool(named) or unnamed > 0,
            unnamed_plurality="person" if unnamed == 1 else "people",
        )

class EventView(BaseModel):
    """Everything an event page needs"""
    uuid: str
    title: str
    link: str
    date_time: str
    description: str
    interested_parties: InterestedParties
