"""Supabase-backed user profile repository."""

from dataclasses import dataclass

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from booking_marketplace.domain.errors import StoreUnavailableError
from booking_marketplace.domain.users import UserProfile, parse_role
from booking_marketplace.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user profile reads."""

    client: Client

    def get_profile(self, uid: str) -> UserProfile | None:
        """Return the profile stored for a uid, if present."""
        try:
            response = (
                self.client.table("users")
                .select("uid, email, role, display_name, photo_url")
                .eq("uid", uid)
                .limit(1)
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise StoreUnavailableError(f"Failed to load user {uid}") from exc
        if not response.data:
            return None
        row = response.data[0]
        return UserProfile(
            uid=row.get("uid"),
            email=row.get("email"),
            role=parse_role(row.get("role")),
            display_name=row.get("display_name"),
            photo_url=row.get("photo_url"),
        )
