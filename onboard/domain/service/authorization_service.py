"""Staff authorization domain service."""

import logfire

from onboard.domain.error import NotAuthorizedError
from onboard.domain.value import RoleId, UserId

from .base import Service


class StaffAuthorizationService(Service):
    """Decides who may issue client invites.

    An empty staff role set authorizes everyone.
    """

    def __init__(self, staff_role_ids: list[RoleId]) -> None:
        self.staff_role_ids = frozenset(staff_role_ids)

    def is_authorized(self, role_ids: list[RoleId]) -> bool:
        """Check a requester's roles against the staff role set."""
        if not self.staff_role_ids:
            return True
        return not self.staff_role_ids.isdisjoint(role_ids)

    def ensure_authorized(self, user_id: UserId, role_ids: list[RoleId]) -> None:
        """Raise unless the requester is authorized.

        Raises:
            NotAuthorizedError: If none of the requester's roles is a staff role
        """
        if not self.is_authorized(role_ids):
            logfire.info("Invite request denied", user_id=user_id)
            raise NotAuthorizedError(user_id)
