"""
Pydantic schemas for booking-related request/response validation.
"""

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field

from frontdesk.models.booking import Booking, BookingStatus


class BookingCreate(BaseModel):
    room_id: str
    guest_name: str = Field(..., min_length=1, max_length=255)
    national_id: str = Field(..., min_length=1, max_length=64)
    phone: str = Field(..., min_length=1, max_length=32)
    number_of_people: int = Field(1, gt=0)
    total_amount: float = Field(..., ge=0)
    paid_amount: float = Field(0, ge=0)
    booking_date: date
    duration_days: int = Field(1, gt=0)


class BookingExtend(BaseModel):
    extra_days: int = Field(..., ge=1)
    extra_amount: float = Field(0, ge=0)


class PaymentUpdate(BaseModel):
    paid_amount: float = Field(..., ge=0)


class BookingResponse(BaseModel):
    id: str
    room_id: str
    guest_id: str
    guest_name: str
    national_id: str
    phone: str
    number_of_people: int
    total_amount: float
    paid_amount: float
    balance_due: float
    is_paid_in_full: bool
    booking_date: date
    duration_days: int
    end_date: date
    check_in_at: Optional[datetime]
    check_out_at: Optional[datetime]
    status: BookingStatus

    model_config = {"from_attributes": True}

    @classmethod
    def from_booking(cls, booking: Booking) -> "BookingResponse":
        # Derived properties are only picked up through attribute access
        return cls.model_validate(booking, from_attributes=True)
