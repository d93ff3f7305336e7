"""
Domain exceptions for the front desk.

Lifecycle commands report missing records and state-machine refusals as a
False return; exceptions are reserved for invalid input and for lookups at
the service edge. The API layer maps every FrontDeskError to an HTTP status.
"""

from fastapi import status


class FrontDeskError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class BookingNotFoundError(FrontDeskError):
    status_code = status.HTTP_404_NOT_FOUND


class RoomNotFoundError(FrontDeskError):
    status_code = status.HTTP_404_NOT_FOUND


class GuestNotFoundError(FrontDeskError):
    status_code = status.HTTP_404_NOT_FOUND


class BookingStateError(FrontDeskError):
    """State-machine precondition failed (already checked in, not checked in, ...)."""

    status_code = status.HTTP_409_CONFLICT


class BookingValidationError(FrontDeskError):
    """Malformed amounts, days, dates or capacity."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class RoomUnavailableError(BookingValidationError):
    status_code = status.HTTP_409_CONFLICT


class RoomInUseError(FrontDeskError):
    status_code = status.HTTP_409_CONFLICT


class PermissionDeniedError(FrontDeskError):
    status_code = status.HTTP_403_FORBIDDEN
