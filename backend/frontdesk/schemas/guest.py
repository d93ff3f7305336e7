"""
Pydantic schemas for guest directory requests and responses.
"""

from typing import Optional
from pydantic import BaseModel, Field


class GuestCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    national_id: str = Field(..., min_length=1, max_length=64)
    phone: str = Field(..., min_length=1, max_length=32)


class GuestUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    phone: Optional[str] = Field(None, min_length=1, max_length=32)


class GuestResponse(BaseModel):
    id: str
    name: str
    national_id: str
    phone: str

    model_config = {"from_attributes": True}
