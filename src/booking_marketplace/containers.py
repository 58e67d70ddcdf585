"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from booking_marketplace.adapters.sendgrid_client import HttpxSendGridClient
from booking_marketplace.adapters.supabase_booking_repository import (
    SupabaseBookingRepository,
)
from booking_marketplace.adapters.supabase_user_repository import (
    SupabaseUserRepository,
)
from booking_marketplace.config import Settings, parse_template_ids
from booking_marketplace.services.checkout import CheckoutService
from booking_marketplace.services.notifications import NotificationService
from booking_marketplace.services.payouts import PayoutService
from booking_marketplace.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    payout_service: PayoutService
    notification_service: NotificationService
    user_service: UserService
    checkout_service: CheckoutService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    email_client = HttpxSendGridClient.create(
        api_key=resolved_settings.sendgrid_api_key,
        from_email=resolved_settings.email_from,
        base_url=resolved_settings.sendgrid_base_url,
        template_ids=parse_template_ids(resolved_settings.sendgrid_template_ids),
    )

    async def close_resources() -> None:
        await email_client.close()

    booking_repository = SupabaseBookingRepository(supabase_client)
    payout_service = PayoutService(booking_repository)
    notification_service = NotificationService(email_client)
    user_service = UserService(SupabaseUserRepository(supabase_client))
    checkout_service = CheckoutService(
        booking_repository=booking_repository,
        payout_service=payout_service,
        user_service=user_service,
        notification_service=notification_service,
    )

    return AppContainer(
        settings=resolved_settings,
        payout_service=payout_service,
        notification_service=notification_service,
        user_service=user_service,
        checkout_service=checkout_service,
        close_resources=close_resources,
    )
