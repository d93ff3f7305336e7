"""
Room inventory endpoints. Creating and deleting rooms is admin-only.
"""

from datetime import date
from enum import Enum
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from frontdesk.api.dependencies import get_front_desk
from frontdesk.core.logging import get_logger
from frontdesk.core.security import require_admin
from frontdesk.models.room import RoomCategory
from frontdesk.schemas.booking import BookingResponse
from frontdesk.schemas.room import RoomCreate, RoomResponse, RoomUpdate
from frontdesk.services.front_desk import FrontDesk

logger = get_logger(__name__)
router = APIRouter(prefix="/rooms", tags=["Rooms"])


class BookingScope(str, Enum):
    ALL = "all"
    CURRENT = "current"
    FUTURE = "future"
    PAST = "past"


@router.get("/", response_model=list[RoomResponse])
def list_rooms(
    category: Optional[RoomCategory] = Query(None),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    desk: FrontDesk = Depends(get_front_desk),
):
    """List rooms, optionally by category and only those free for [start_date, end_date)."""
    rooms = desk.rooms.search(category=category, start_date=start_date, end_date=end_date)
    return [RoomResponse.from_room(room) for room in rooms]


@router.post(
    "/",
    response_model=RoomResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_room(room_data: RoomCreate, desk: FrontDesk = Depends(get_front_desk)):
    room_id = desk.rooms.create(room_data.model_dump())
    logger.info("room_created", room_id=room_id, room_number=room_data.room_number)
    return RoomResponse.from_room(desk.rooms.get_or_raise(room_id))


@router.get("/{room_id}", response_model=RoomResponse)
def get_room(room_id: str, desk: FrontDesk = Depends(get_front_desk)):
    return RoomResponse.from_room(desk.rooms.get_or_raise(room_id))


@router.patch("/{room_id}", response_model=RoomResponse)
def update_room(room_id: str, room_data: RoomUpdate, desk: FrontDesk = Depends(get_front_desk)):
    desk.rooms.get_or_raise(room_id)
    desk.rooms.update(room_id, **room_data.model_dump(exclude_unset=True, exclude_none=True))
    logger.info("room_updated", room_id=room_id)
    return RoomResponse.from_room(desk.rooms.get_or_raise(room_id))


@router.delete(
    "/{room_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_room(room_id: str, desk: FrontDesk = Depends(get_front_desk)):
    """409 while a guest is checked in today or a booking is still to come."""
    desk.booking_service.remove_room(room_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{room_id}/bookings", response_model=list[BookingResponse])
def list_room_bookings(
    room_id: str,
    scope: BookingScope = Query(BookingScope.ALL),
    desk: FrontDesk = Depends(get_front_desk),
):
    desk.rooms.get_or_raise(room_id)
    if scope == BookingScope.CURRENT:
        bookings = desk.availability.current_bookings_for_room(room_id)
    elif scope == BookingScope.FUTURE:
        bookings = desk.availability.future_bookings_for_room(room_id)
    elif scope == BookingScope.PAST:
        bookings = desk.availability.past_bookings_for_room(room_id)
    else:
        bookings = desk.bookings.list_by_room(room_id)
    return [BookingResponse.from_booking(b) for b in bookings]
