"""User profile lookups."""

from dataclasses import dataclass
from typing import Protocol

from booking_marketplace.domain.users import UserProfile


class UserRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, uid: str) -> UserProfile | None:
        """Return the stored profile for a uid, if present."""


@dataclass
class UserService:
    """Application service for reading user profiles."""

    repository: UserRepository

    def get_profile(self, uid: str) -> UserProfile | None:
        """Return the profile for a uid, or None when unknown."""
        if not uid:
            return None
        return self.repository.get_profile(uid)
