"""Session endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response

if TYPE_CHECKING:
    from booking_marketplace.containers import AppContainer

router = APIRouter(tags=["auth"])


@router.post("/logout")
async def logout(request: Request, response: Response) -> dict[str, bool]:
    """Clear the session cookie; succeeds whether or not a session existed."""
    container: AppContainer = request.app.state.container
    response.delete_cookie(container.settings.session_cookie_name, path="/")
    return {"success": True}
