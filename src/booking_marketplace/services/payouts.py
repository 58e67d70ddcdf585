"""Booking payout status transitions."""

import logging
from dataclasses import dataclass
from typing import Protocol

from booking_marketplace.domain.bookings import BookingRecord, PayoutStatus

logger = logging.getLogger(__name__)


class BookingRepository(Protocol):
    """Persistence interface for booking documents."""

    def update_payout_status(self, booking_id: str, status: PayoutStatus) -> None:
        """Set the payout status of an existing booking.

        Raises NotFoundError when the booking is absent and
        StoreUnavailableError when the update cannot be committed.
        """

    def mark_paid(self, booking_id: str, stripe_session_id: str | None) -> None:
        """Set status to paid and record the checkout session id."""

    def get_booking(self, booking_id: str) -> BookingRecord | None:
        """Return the booking, if present."""


@dataclass
class PayoutService:
    """Application service for booking payout state."""

    repository: BookingRepository

    def mark_as_held(self, booking_id: str) -> None:
        """Mark the booking's payout as held.

        The previous status is not inspected; repeated calls are harmless.
        """
        if not booking_id or not booking_id.strip():
            raise ValueError("booking_id must be a non-empty string")
        self.repository.update_payout_status(booking_id, PayoutStatus.HELD)
        logger.info("Booking payout held", extra={"booking_id": booking_id})
