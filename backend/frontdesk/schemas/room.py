"""
Pydantic schemas for room inventory requests and responses.
"""

from typing import Optional
from pydantic import BaseModel, Field

from frontdesk.models.room import Room, RoomCategory


class RoomCreate(BaseModel):
    room_number: str = Field(..., min_length=1, max_length=16)
    floor: int = Field(..., ge=0)
    category: RoomCategory
    beds: int = Field(1, ge=1)
    bathrooms: int = Field(1, ge=0)
    has_ac: bool = False
    description: str = Field("", max_length=1000)
    problems: list[str] = Field(default_factory=list)


class RoomUpdate(BaseModel):
    room_number: Optional[str] = Field(None, min_length=1, max_length=16)
    floor: Optional[int] = Field(None, ge=0)
    category: Optional[RoomCategory] = None
    beds: Optional[int] = Field(None, ge=1)
    bathrooms: Optional[int] = Field(None, ge=0)
    has_ac: Optional[bool] = None
    description: Optional[str] = Field(None, max_length=1000)
    problems: Optional[list[str]] = None


class RoomResponse(BaseModel):
    id: str
    room_number: str
    floor: int
    category: RoomCategory
    beds: int
    bathrooms: int
    has_ac: bool
    description: str
    problems: list[str]
    max_guests: int

    model_config = {"from_attributes": True}

    @classmethod
    def from_room(cls, room: Room) -> "RoomResponse":
        return cls.model_validate(room, from_attributes=True)


class RoomAvailabilityResponse(BaseModel):
    room_id: str
    start_date: str
    end_date: str
    is_available: bool


class RoomIdsResponse(BaseModel):
    room_ids: list[str]
