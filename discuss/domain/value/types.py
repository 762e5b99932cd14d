"""Domain value objects for discussions."""

from enum import Enum

from pydantic import field_validator

from discuss.domain.value.common import RootValueObject, ValueObject
from discuss.domain.value.identifiers import UserId


class NotificationType(str, Enum):
    """Kind of notification.

    Only replies to a user's comment produce notifications today.
    """

    COMMENT_REPLY = "comment_reply"


class DisplayName(RootValueObject[str]):
    """Human-readable name of an identity, shown next to its comments."""

    @field_validator("root")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        """Validate display name is not blank and within length limits."""
        if not v.strip():
            raise ValueError("Display name must not be blank")
        if len(v) > 255:
            raise ValueError("Display name must be at most 255 characters")
        return v


class Actor(ValueObject):
    """The resolved, authenticated identity performing an operation.

    Authentication happens outside the core; services only compare ``id``
    for ownership and use ``display_name`` when rendering notifications.
    """

    id: UserId
    display_name: DisplayName
