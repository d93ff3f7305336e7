"""
Guest directory keyed by national ID.
"""

from typing import Optional

from frontdesk.core.errors import GuestNotFoundError
from frontdesk.core.logging import get_logger
from frontdesk.models.guest import Guest
from frontdesk.services.store import InMemoryStore

logger = get_logger(__name__)


class GuestDirectory(InMemoryStore[Guest]):
    record_type = Guest
    record_name = "guest"

    def get_or_raise(self, guest_id: str) -> Guest:
        guest = self.get_by_id(guest_id)
        if guest is None:
            raise GuestNotFoundError(f"Guest {guest_id} not found")
        return guest

    def lookup_by_national_id(self, national_id: str) -> Optional[Guest]:
        """Autofill source for name and phone when a known ID is typed in."""
        matches = self.filter(lambda guest: guest.national_id == national_id)
        return matches[0] if matches else None

    def find_or_create(self, name: str, national_id: str, phone: str) -> str:
        """
        Return the id of the guest with this national ID, creating one if needed.
        A known guest arriving with a new phone number gets it updated; the
        name on file is left alone.
        """
        existing = self.lookup_by_national_id(national_id)
        if existing is not None:
            if existing.phone != phone:
                self.update(existing.id, phone=phone)
                logger.info("guest_phone_updated", guest_id=existing.id)
            return existing.id

        guest_id = self.create({"name": name, "national_id": national_id, "phone": phone})
        logger.info("guest_created", guest_id=guest_id)
        return guest_id
