"""Completed checkout handling."""

import logging
from dataclasses import dataclass

from booking_marketplace.domain.errors import StoreUnavailableError
from booking_marketplace.services.notifications import NotificationService
from booking_marketplace.services.payouts import BookingRepository, PayoutService
from booking_marketplace.services.users import UserService

logger = logging.getLogger(__name__)


@dataclass
class CheckoutService:
    """Records a paid booking, holds its payout and confirms it to the client."""

    booking_repository: BookingRepository
    payout_service: PayoutService
    user_service: UserService
    notification_service: NotificationService

    async def complete_checkout(
        self, booking_id: str, stripe_session_id: str | None
    ) -> bool:
        """Apply a completed checkout to the booking.

        Returns True when a confirmation email was sent. Store and email
        errors propagate; a failed client profile lookup only skips the email.
        """
        if not booking_id or not booking_id.strip():
            raise ValueError("booking_id must be a non-empty string")
        self.booking_repository.mark_paid(booking_id, stripe_session_id)
        self.payout_service.mark_as_held(booking_id)

        booking = self.booking_repository.get_booking(booking_id)
        if booking is None:
            logger.warning("Paid booking vanished", extra={"booking_id": booking_id})
            return False

        client_email = booking.client_email
        client_name = booking.client_name
        if not client_email and booking.client_user_id:
            try:
                profile = self.user_service.get_profile(booking.client_user_id)
            except StoreUnavailableError:
                logger.warning(
                    "Could not load client profile",
                    extra={"booking_id": booking_id, "uid": booking.client_user_id},
                )
                profile = None
            if profile is not None:
                client_email = profile.email
                client_name = client_name or profile.display_name

        if not client_email:
            logger.warning(
                "No client email for paid booking", extra={"booking_id": booking_id}
            )
            return False

        await self.notification_service.send_booking_confirmation(
            client_email, booking, client_name
        )
        logger.info(
            "Booking confirmation sent",
            extra={"booking_id": booking_id, "to_email": client_email},
        )
        return True
