"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import stripe
from fastapi import FastAPI, Header, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from booking_marketplace.api.admin import router as admin_router
from booking_marketplace.api.auth import router as auth_router
from booking_marketplace.api.stripe_models import StripeEvent
from booking_marketplace.app_logging import configure_logging, log_level_for
from booking_marketplace.containers import AppContainer
from booking_marketplace.domain.errors import (
    EmailDeliveryError,
    NotFoundError,
    StoreUnavailableError,
)

CHECKOUT_COMPLETED = "checkout.session.completed"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(log_level_for(container.settings.environment))
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(admin_router)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.warning(
            "Document not found",
            extra={"collection": exc.collection, "document_id": exc.document_id},
        )
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(StoreUnavailableError)
    async def handle_store_unavailable(
        request: Request, exc: StoreUnavailableError
    ) -> JSONResponse:
        logger.error("Document store unavailable: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": str(exc)},
        )

    @app.exception_handler(EmailDeliveryError)
    async def handle_email_delivery(
        request: Request, exc: EmailDeliveryError
    ) -> JSONResponse:
        logger.error("Email delivery failed: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/webhooks/stripe")
    async def stripe_webhook(
        request: Request, stripe_signature: str | None = Header(default=None)
    ) -> dict[str, bool]:
        """Record paid checkouts: mark paid, hold payout, confirm by email."""
        state_container: AppContainer = request.app.state.container
        payload = await request.body()
        try:
            stripe.Webhook.construct_event(
                payload,
                stripe_signature or "",
                state_container.settings.stripe_webhook_secret,
            )
        except stripe.SignatureVerificationError as exc:
            logger.warning("Invalid Stripe webhook signature")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid signature"
            ) from exc
        except ValueError as exc:
            logger.warning("Undecodable Stripe webhook payload")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid payload"
            ) from exc
        try:
            event = StripeEvent.model_validate_json(payload)
        except ValidationError as exc:
            logger.warning("Invalid Stripe webhook payload")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid payload"
            ) from exc

        if event.type != CHECKOUT_COMPLETED:
            return {"received": True}

        session = event.data.object
        booking_id = session.metadata.get("bookingId")
        if not booking_id or not booking_id.strip():
            logger.warning(
                "Checkout completed without a booking id",
                extra={"event_id": event.id},
            )
            return {"received": True}
        try:
            await state_container.checkout_service.complete_checkout(
                booking_id, session.id
            )
        except NotFoundError:
            logger.warning(
                "Booking for completed checkout not found",
                extra={"event_id": event.id, "booking_id": booking_id},
            )
        except EmailDeliveryError:
            logger.exception(
                "Booking confirmation email failed",
                extra={"event_id": event.id, "booking_id": booking_id},
            )
        return {"received": True}

    return app
