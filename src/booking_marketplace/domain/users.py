"""User identity and role models."""

from dataclasses import dataclass, fields
from enum import StrEnum


class UserRole(StrEnum):
    """Closed set of user roles."""

    ADMIN = "admin"
    MODERATOR = "moderator"
    CREATOR = "creator"
    USER = "user"


@dataclass(frozen=True)
class UserProfile:
    """Partial user profile.

    Every field may be absent, so an instance can also stand for "no user".
    """

    uid: str | None = None
    email: str | None = None
    role: UserRole | None = None
    display_name: str | None = None
    photo_url: str | None = None

    @property
    def is_empty(self) -> bool:
        """Return True when no field is populated."""
        return all(getattr(self, field.name) is None for field in fields(self))

    def has_role(self, *roles: UserRole) -> bool:
        """Return True when the profile carries one of the given roles."""
        return self.role is not None and self.role in roles


def parse_role(value: object) -> UserRole | None:
    """Map a stored role string to a UserRole, ignoring unknown values."""
    if not isinstance(value, str):
        return None
    try:
        return UserRole(value.strip().lower())
    except ValueError:
        return None
