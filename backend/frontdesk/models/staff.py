from enum import Enum


class StaffRole(str, Enum):
    """Opaque capability flag supplied by the caller; not an identity."""

    ADMIN = "admin"
    MANAGER = "manager"
