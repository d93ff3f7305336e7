"""
Role gating for staff actions.

The role arrives as a plain request header and is trusted as-is; there is
no login or token check behind it. Missing header means the least
privileged role.
"""

from fastapi import Depends, Header

from frontdesk.core.errors import PermissionDeniedError
from frontdesk.core.logging import get_logger
from frontdesk.models.staff import StaffRole

logger = get_logger(__name__)

ROLE_HEADER = "X-Staff-Role"


def get_staff_role(
    role: StaffRole = Header(StaffRole.MANAGER, alias=ROLE_HEADER),
) -> StaffRole:
    return role


def require_admin(role: StaffRole = Depends(get_staff_role)) -> StaffRole:
    """Dependency for inventory changes only admins may make."""
    if role != StaffRole.ADMIN:
        logger.warning("permission_denied", role=role.value, required=StaffRole.ADMIN.value)
        raise PermissionDeniedError("Only admins can change room inventory")
    return role
