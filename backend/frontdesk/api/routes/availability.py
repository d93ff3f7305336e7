"""
Availability queries. End dates are exclusive: a stay from the 10th to the
13th occupies the nights of the 10th, 11th and 12th.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from frontdesk.api.dependencies import get_front_desk
from frontdesk.schemas.room import RoomAvailabilityResponse, RoomIdsResponse
from frontdesk.services.front_desk import FrontDesk

router = APIRouter(prefix="/availability", tags=["Availability"])


@router.get("/rooms/{room_id}", response_model=RoomAvailabilityResponse)
def check_room_availability(
    room_id: str,
    start_date: date = Query(...),
    end_date: date = Query(...),
    exclude_booking_id: Optional[str] = Query(None),
    desk: FrontDesk = Depends(get_front_desk),
):
    desk.rooms.get_or_raise(room_id)
    available = desk.availability.is_available(
        room_id, start_date, end_date, exclude_booking_id=exclude_booking_id
    )
    return RoomAvailabilityResponse(
        room_id=room_id,
        start_date=start_date.isoformat(),
        end_date=end_date.isoformat(),
        is_available=available,
    )


@router.get("/rooms", response_model=RoomIdsResponse)
def available_rooms(
    start_date: date = Query(...),
    end_date: date = Query(...),
    desk: FrontDesk = Depends(get_front_desk),
):
    return RoomIdsResponse(room_ids=desk.availability.available_room_ids(start_date, end_date))


@router.get("/occupied", response_model=RoomIdsResponse)
def occupied_rooms(desk: FrontDesk = Depends(get_front_desk)):
    """Rooms with a guest checked in whose stay covers today."""
    return RoomIdsResponse(room_ids=desk.availability.occupied_room_ids())


@router.get("/booked", response_model=RoomIdsResponse)
def booked_rooms(
    day: date = Query(..., alias="date"),
    desk: FrontDesk = Depends(get_front_desk),
):
    return RoomIdsResponse(room_ids=desk.availability.booked_room_ids(day))
