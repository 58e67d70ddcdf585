"""Transactional email triggers."""

from dataclasses import dataclass
from typing import Protocol

from booking_marketplace.domain.bookings import BookingRecord

DISPUTE_SUBJECT = "New Dispute Raised"
DISPUTE_TEMPLATE = "dispute-notification"
REVIEW_REQUEST_SUBJECT = "How was your session?"
REVIEW_REQUEST_TEMPLATE = "review-request"
BOOKING_CONFIRMATION_SUBJECT = "Your Booking is Confirmed"
BOOKING_CONFIRMATION_TEMPLATE = "booking-confirmation"


class EmailSender(Protocol):
    """Interface for the outbound email capability."""

    async def send(
        self,
        to_email: str,
        subject: str,
        template_id: str,
        data: dict[str, object],
    ) -> None:
        """Send a templated email or raise EmailDeliveryError."""


@dataclass
class NotificationService:
    """Sends the fixed booking notifications.

    Exactly one send is attempted per call and delivery errors are not retried.
    """

    email_sender: EmailSender

    async def send_dispute_notification(self, to_email: str, dispute_id: str) -> None:
        """Notify a party that a dispute was raised."""
        await self.email_sender.send(
            to_email,
            DISPUTE_SUBJECT,
            DISPUTE_TEMPLATE,
            {"disputeId": dispute_id},
        )

    async def send_review_request(self, to_email: str, booking_id: str) -> None:
        """Ask a client to review a completed booking."""
        await self.email_sender.send(
            to_email,
            REVIEW_REQUEST_SUBJECT,
            REVIEW_REQUEST_TEMPLATE,
            {"bookingId": booking_id},
        )

    async def send_booking_confirmation(
        self, to_email: str, booking: BookingRecord, client_name: str | None
    ) -> None:
        """Confirm a paid booking to the client."""
        await self.email_sender.send(
            to_email,
            BOOKING_CONFIRMATION_SUBJECT,
            BOOKING_CONFIRMATION_TEMPLATE,
            {
                "bookingId": booking.id,
                "clientName": client_name,
                "providerName": booking.provider_name,
                "serviceName": booking.service_name,
                "total": booking.total,
                "stripeSessionId": booking.stripe_session_id,
                "contractId": booking.contract_id,
            },
        )
