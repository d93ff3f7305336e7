"""
Booking record held by the booking repository.

Key design decisions:
- guest_name / national_id / phone are a snapshot taken at creation, not a
  live reference into the guest directory
- booking_date is a calendar date, check-in/out are full timestamps
- status is derived from the timestamps, never stored
"""

from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class BookingStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"


class Booking(BaseModel):
    id: str
    room_id: str
    guest_id: str

    guest_name: str
    national_id: str
    phone: str

    number_of_people: int = Field(..., ge=1)
    total_amount: float = Field(..., ge=0)
    paid_amount: float = Field(0, ge=0)

    booking_date: date
    duration_days: int = Field(..., ge=1)

    check_in_at: Optional[datetime] = None
    check_out_at: Optional[datetime] = None

    @property
    def status(self) -> BookingStatus:
        if self.check_out_at is not None:
            return BookingStatus.COMPLETED
        if self.check_in_at is not None:
            return BookingStatus.ACTIVE
        return BookingStatus.PENDING

    @property
    def end_date(self) -> date:
        """Exclusive end: the day the room is vacated."""
        return self.booking_date + timedelta(days=self.duration_days)

    @property
    def last_occupied_day(self) -> date:
        return self.booking_date + timedelta(days=self.duration_days - 1)

    @property
    def balance_due(self) -> float:
        return self.total_amount - self.paid_amount

    @property
    def is_paid_in_full(self) -> bool:
        return self.paid_amount >= self.total_amount

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, room={self.room_id}, guest={self.guest_id}, status={self.status.value})>"
