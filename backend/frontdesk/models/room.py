"""
Room inventory record. Guest-count limits hang off the category.
"""

from enum import Enum

from pydantic import BaseModel, Field


class RoomCategory(str, Enum):
    DOUBLE = "Double"
    COUPLE = "Couple"
    CONNECTING = "Connecting"


CATEGORY_MAX_GUESTS = {
    RoomCategory.COUPLE: 2,
    RoomCategory.DOUBLE: 5,
    RoomCategory.CONNECTING: 10,
}


class Room(BaseModel):
    id: str
    room_number: str
    floor: int
    category: RoomCategory
    beds: int = Field(1, ge=1)
    bathrooms: int = Field(1, ge=0)
    has_ac: bool = False
    description: str = ""
    problems: list[str] = Field(default_factory=list)

    @property
    def max_guests(self) -> int:
        return CATEGORY_MAX_GUESTS[self.category]

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, number={self.room_number}, category={self.category.value})>"
