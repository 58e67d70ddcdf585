"""Booking domain values."""

from dataclasses import dataclass
from enum import StrEnum

BOOKINGS_COLLECTION = "bookings"


class PayoutStatus(StrEnum):
    """Known payout states of a booking.

    Only ``held`` is defined; the full settlement lifecycle is owned elsewhere.
    """

    HELD = "held"


class BookingStatus(StrEnum):
    """Booking states written by this service."""

    PAID = "paid"


@dataclass(frozen=True)
class BookingRecord:
    """Booking fields read when confirming a completed checkout."""

    id: str
    status: str | None = None
    payout_status: str | None = None
    client_id: str | None = None
    buyer_id: str | None = None
    client_email: str | None = None
    client_name: str | None = None
    provider_name: str | None = None
    service_name: str | None = None
    total: float | None = None
    stripe_session_id: str | None = None
    contract_id: str | None = None

    @property
    def client_user_id(self) -> str | None:
        """Return the id of the paying user, preferring client over buyer."""
        return self.client_id or self.buyer_id
