"""
Room inventory.

Deleting a room is refused while it still has a guest checked in today or a
booking that has not started yet. Those checks come from the availability
engine, which is handed in after construction because the engine itself
needs the inventory's room list.
"""

from typing import Optional

from frontdesk.core.errors import RoomInUseError, RoomNotFoundError
from frontdesk.core.logging import get_logger
from frontdesk.models.room import Room, RoomCategory
from frontdesk.services.store import InMemoryStore

logger = get_logger(__name__)


class RoomInventory(InMemoryStore[Room]):
    record_type = Room
    record_name = "room"

    def __init__(self, rooms=(), availability=None):
        super().__init__(rooms)
        self.availability = availability

    def get_or_raise(self, room_id: str) -> Room:
        room = self.get_by_id(room_id)
        if room is None:
            raise RoomNotFoundError(f"Room {room_id} not found")
        return room

    def list_by_category(self, category: RoomCategory) -> list[Room]:
        return self.filter(lambda room: room.category == category)

    def room_ids(self) -> list[str]:
        return [room.id for room in self.list_all()]

    def search(
        self,
        category: Optional[RoomCategory] = None,
        start_date=None,
        end_date=None,
    ) -> list[Room]:
        """Rooms matching the category filter, free for [start_date, end_date) when both are given."""
        rooms = self.list_by_category(category) if category else self.list_all()
        if start_date is None or end_date is None or self.availability is None:
            return rooms
        return [r for r in rooms if self.availability.is_available(r.id, start_date, end_date)]

    def ensure_deletable(self, room_id: str) -> None:
        self.get_or_raise(room_id)
        if self.availability is None:
            return
        if self.availability.current_bookings_for_room(room_id):
            raise RoomInUseError("Cannot delete a room with active bookings")
        if self.availability.future_bookings_for_room(room_id):
            raise RoomInUseError("Cannot delete a room with future bookings")

    def remove(self, room_id: str) -> None:
        """
        Guarded delete; the plain `delete` stays unguarded. Not atomic with
        booking creation on its own, callers go through
        BookingService.remove_room.
        """
        self.ensure_deletable(room_id)
        self.delete(room_id)
        logger.info("room_deleted", room_id=room_id)
