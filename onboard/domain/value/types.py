"""Domain value objects for client onboarding.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

from enum import Enum

from pydantic import field_validator

from onboard.domain.value.common import RootValueObject


class PrincipalType(str, Enum):
    """Target of a permission overwrite."""

    ROLE = "role"
    MEMBER = "member"


class Permission(str, Enum):
    """Channel permissions managed on client workspaces."""

    VIEW_CHANNEL = "view_channel"
    SEND_MESSAGES = "send_messages"


class Firstname(RootValueObject[str]):
    """Client first name used to name the workspace.

    Always stored trimmed; blank names are rejected.
    """

    @field_validator("root")
    @classmethod
    def validate_firstname(cls, v: str) -> str:
        """Trim and validate the name is not blank."""
        v = v.strip()
        if not v:
            raise ValueError("Firstname must not be blank")
        return v
