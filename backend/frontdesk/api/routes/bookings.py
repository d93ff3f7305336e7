"""
Booking endpoints: creation and the check-in / check-out / extend / payment
lifecycle.

Endpoints are plain `def` so FastAPI runs them in its thread pool; the
lifecycle controller serializes the commands themselves.
"""

from fastapi import APIRouter, Depends, Response, status

from frontdesk.api.dependencies import get_front_desk
from frontdesk.core.errors import BookingNotFoundError, BookingStateError
from frontdesk.core.logging import get_logger
from frontdesk.models.booking import Booking
from frontdesk.schemas.booking import BookingCreate, BookingExtend, BookingResponse, PaymentUpdate
from frontdesk.services.front_desk import FrontDesk

logger = get_logger(__name__)
router = APIRouter(prefix="/bookings", tags=["Bookings"])


def _get_booking(desk: FrontDesk, booking_id: str) -> Booking:
    booking = desk.bookings.get_by_id(booking_id)
    if booking is None:
        raise BookingNotFoundError(f"Booking {booking_id} not found")
    return booking


def _result(desk: FrontDesk, booking_id: str, ok: bool, refusal: str) -> BookingResponse:
    """Turn a controller's boolean into a response, 404 or 409."""
    booking = _get_booking(desk, booking_id)
    if not ok:
        raise BookingStateError(refusal)
    return BookingResponse.from_booking(booking)


@router.post("/", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_booking(booking_data: BookingCreate, desk: FrontDesk = Depends(get_front_desk)):
    """
    Book a room for a guest.

    The guest is looked up by national ID and created if unknown. Fails with
    409 if the room is taken for any day of the stay, 422 if the party is too
    large for the room category or the payment exceeds the total.
    """
    booking_id = desk.booking_service.create_booking(booking_data)
    return BookingResponse.from_booking(_get_booking(desk, booking_id))


@router.get("/", response_model=list[BookingResponse])
def list_bookings(desk: FrontDesk = Depends(get_front_desk)):
    return [BookingResponse.from_booking(b) for b in desk.bookings.list_all()]


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(booking_id: str, desk: FrontDesk = Depends(get_front_desk)):
    return BookingResponse.from_booking(_get_booking(desk, booking_id))


@router.post("/{booking_id}/check-in", response_model=BookingResponse)
def check_in(booking_id: str, desk: FrontDesk = Depends(get_front_desk)):
    """Mark the guest as arrived. 409 if already checked in or the room is still occupied."""
    ok = desk.booking_service.check_in(booking_id)
    return _result(desk, booking_id, ok, "Failed to check in guest")


@router.post("/{booking_id}/check-out", response_model=BookingResponse)
def check_out(booking_id: str, desk: FrontDesk = Depends(get_front_desk)):
    """Mark the guest as departed. 409 unless the guest is currently checked in."""
    ok = desk.booking_service.check_out(booking_id)
    return _result(desk, booking_id, ok, "Failed to check out guest")


@router.post("/{booking_id}/extend", response_model=BookingResponse)
def extend_booking(
    booking_id: str,
    extension: BookingExtend,
    desk: FrontDesk = Depends(get_front_desk),
):
    """Add nights to the stay; 422 if the room is booked for any of them."""
    ok = desk.booking_service.extend(booking_id, extension.extra_days, extension.extra_amount)
    return _result(desk, booking_id, ok, "Failed to extend booking")


@router.put("/{booking_id}/payment", response_model=BookingResponse)
def update_payment(
    booking_id: str,
    payment: PaymentUpdate,
    desk: FrontDesk = Depends(get_front_desk),
):
    ok = desk.booking_service.update_payment(booking_id, payment.paid_amount)
    return _result(desk, booking_id, ok, "Failed to update payment")


@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_booking(booking_id: str, desk: FrontDesk = Depends(get_front_desk)):
    if not desk.booking_service.delete_booking(booking_id):
        raise BookingNotFoundError(f"Booking {booking_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
