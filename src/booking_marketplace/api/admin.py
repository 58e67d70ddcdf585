"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from pydantic import BaseModel

from booking_marketplace.domain.bookings import PayoutStatus

if TYPE_CHECKING:
    from booking_marketplace.containers import AppContainer
    from booking_marketplace.domain.users import UserProfile

router = APIRouter(prefix="/admin", tags=["admin"])


class DisputeNotificationRequest(BaseModel):
    """Body for sending a dispute notification."""

    to_email: str
    dispute_id: str


class ReviewRequestRequest(BaseModel):
    """Body for sending a review request."""

    to_email: str
    booking_id: str


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.post(
    "/bookings/{booking_id}/payout/hold", dependencies=[Depends(require_admin)]
)
async def hold_payout(booking_id: str, request: Request) -> dict[str, str]:
    """Mark a booking's payout as held."""
    container: AppContainer = request.app.state.container
    try:
        container.payout_service.mark_as_held(booking_id)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return {"booking_id": booking_id, "payout_status": str(PayoutStatus.HELD)}


@router.post("/notifications/dispute", dependencies=[Depends(require_admin)])
async def send_dispute_notification(
    body: DisputeNotificationRequest, request: Request
) -> dict[str, str]:
    """Send the dispute notification email."""
    container: AppContainer = request.app.state.container
    await container.notification_service.send_dispute_notification(
        body.to_email, body.dispute_id
    )
    return {"status": "sent"}


@router.post("/notifications/review-request", dependencies=[Depends(require_admin)])
async def send_review_request(
    body: ReviewRequestRequest, request: Request
) -> dict[str, str]:
    """Send the review request email."""
    container: AppContainer = request.app.state.container
    await container.notification_service.send_review_request(
        body.to_email, body.booking_id
    )
    return {"status": "sent"}


@router.get("/users/{uid}", dependencies=[Depends(require_admin)])
async def user_profile(uid: str, request: Request) -> dict[str, object]:
    """Return the stored profile for a user."""
    container: AppContainer = request.app.state.container
    profile = container.user_service.get_profile(uid)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return _serialize_profile(profile)


def _serialize_profile(profile: UserProfile) -> dict[str, object]:
    return {
        "uid": profile.uid,
        "email": profile.email,
        "role": profile.role.value if profile.role else None,
        "display_name": profile.display_name,
        "photo_url": profile.photo_url,
    }
