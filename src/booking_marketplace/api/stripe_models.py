"""Pydantic models for Stripe webhook payloads."""

from pydantic import BaseModel, Field


class StripeEventObject(BaseModel):
    """Object carried by a Stripe event (only the fields we read)."""

    id: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)


class StripeEventData(BaseModel):
    """Stripe event data envelope."""

    object: StripeEventObject


class StripeEvent(BaseModel):
    """Stripe webhook event."""

    id: str
    type: str
    data: StripeEventData
