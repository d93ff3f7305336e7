from frontdesk.schemas.booking import BookingCreate, BookingExtend, BookingResponse, PaymentUpdate
from frontdesk.schemas.guest import GuestCreate, GuestResponse, GuestUpdate
from frontdesk.schemas.room import RoomCreate, RoomResponse, RoomUpdate

__all__ = [
    "BookingCreate", "BookingExtend", "BookingResponse", "PaymentUpdate",
    "GuestCreate", "GuestResponse", "GuestUpdate",
    "RoomCreate", "RoomResponse", "RoomUpdate",
]
