"""Supabase-backed booking repository."""

from dataclasses import dataclass

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from booking_marketplace.domain.bookings import (
    BOOKINGS_COLLECTION,
    BookingRecord,
    BookingStatus,
    PayoutStatus,
)
from booking_marketplace.domain.errors import NotFoundError, StoreUnavailableError
from booking_marketplace.services.payouts import BookingRepository

_BOOKING_COLUMNS = (
    "id, status, payout_status, client_id, buyer_id, client_email, client_name, "
    "provider_name, service_name, total, stripe_session_id, contract_id"
)


@dataclass
class SupabaseBookingRepository(BookingRepository):
    """Supabase implementation for booking persistence."""

    client: Client

    def update_payout_status(self, booking_id: str, status: PayoutStatus) -> None:
        """Update payout_status on the booking row; never inserts."""
        self._update(booking_id, {"payout_status": str(status)})

    def mark_paid(self, booking_id: str, stripe_session_id: str | None) -> None:
        """Set the booking status to paid with its checkout session id."""
        self._update(
            booking_id,
            {"status": str(BookingStatus.PAID), "stripe_session_id": stripe_session_id},
        )

    def get_booking(self, booking_id: str) -> BookingRecord | None:
        """Return the booking row, if present."""
        try:
            response = (
                self.client.table(BOOKINGS_COLLECTION)
                .select(_BOOKING_COLUMNS)
                .eq("id", booking_id)
                .limit(1)
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise StoreUnavailableError(f"Failed to load booking {booking_id}") from exc
        if not response.data:
            return None
        row = response.data[0]
        total = row.get("total")
        return BookingRecord(
            id=str(row["id"]),
            status=row.get("status"),
            payout_status=row.get("payout_status"),
            client_id=row.get("client_id"),
            buyer_id=row.get("buyer_id"),
            client_email=row.get("client_email"),
            client_name=row.get("client_name"),
            provider_name=row.get("provider_name"),
            service_name=row.get("service_name"),
            total=float(total) if total is not None else None,
            stripe_session_id=row.get("stripe_session_id"),
            contract_id=row.get("contract_id"),
        )

    def _update(self, booking_id: str, values: dict[str, object]) -> None:
        try:
            response = (
                self.client.table(BOOKINGS_COLLECTION)
                .update(values)
                .eq("id", booking_id)
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise StoreUnavailableError(
                f"Failed to update booking {booking_id}"
            ) from exc
        if not response.data:
            raise NotFoundError(BOOKINGS_COLLECTION, booking_id)
