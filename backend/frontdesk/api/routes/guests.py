"""
Guest directory endpoints.
"""

from fastapi import APIRouter, Depends, Query, Response, status

from frontdesk.api.dependencies import get_front_desk
from frontdesk.core.errors import GuestNotFoundError
from frontdesk.core.logging import get_logger
from frontdesk.schemas.booking import BookingResponse
from frontdesk.schemas.guest import GuestCreate, GuestResponse, GuestUpdate
from frontdesk.services.front_desk import FrontDesk

logger = get_logger(__name__)
router = APIRouter(prefix="/guests", tags=["Guests"])


@router.get("/", response_model=list[GuestResponse])
def list_guests(desk: FrontDesk = Depends(get_front_desk)):
    return desk.guests.list_all()


@router.post("/", response_model=GuestResponse, status_code=status.HTTP_201_CREATED)
def register_guest(guest_data: GuestCreate, desk: FrontDesk = Depends(get_front_desk)):
    """Find the guest by national ID or add them; a changed phone number is stored."""
    guest_id = desk.guests.find_or_create(**guest_data.model_dump())
    return desk.guests.get_or_raise(guest_id)


@router.get("/lookup", response_model=GuestResponse)
def lookup_guest(
    national_id: str = Query(..., min_length=1),
    desk: FrontDesk = Depends(get_front_desk),
):
    """Autofill name and phone for a national ID typed at the desk."""
    guest = desk.guests.lookup_by_national_id(national_id)
    if guest is None:
        raise GuestNotFoundError(f"No guest with national ID {national_id}")
    return guest


@router.get("/{guest_id}", response_model=GuestResponse)
def get_guest(guest_id: str, desk: FrontDesk = Depends(get_front_desk)):
    return desk.guests.get_or_raise(guest_id)


@router.patch("/{guest_id}", response_model=GuestResponse)
def update_guest(guest_id: str, guest_data: GuestUpdate, desk: FrontDesk = Depends(get_front_desk)):
    """Existing bookings keep the name and phone they were made with."""
    desk.guests.get_or_raise(guest_id)
    desk.guests.update(guest_id, **guest_data.model_dump(exclude_unset=True, exclude_none=True))
    logger.info("guest_updated", guest_id=guest_id)
    return desk.guests.get_or_raise(guest_id)


@router.delete("/{guest_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_guest(guest_id: str, desk: FrontDesk = Depends(get_front_desk)):
    if not desk.guests.delete(guest_id):
        raise GuestNotFoundError(f"Guest {guest_id} not found")
    logger.info("guest_deleted", guest_id=guest_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{guest_id}/bookings", response_model=list[BookingResponse])
def list_guest_bookings(guest_id: str, desk: FrontDesk = Depends(get_front_desk)):
    desk.guests.get_or_raise(guest_id)
    return [BookingResponse.from_booking(b) for b in desk.bookings.list_by_guest(guest_id)]
