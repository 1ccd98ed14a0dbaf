"""User profile endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Body, Depends, Request, status

from macro_tracker.api.dependencies import current_user_id
from macro_tracker.api.errors import ApiError, parse_body
from macro_tracker.api.models import UserLogin
from macro_tracker.api.serializers import serialize_user

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login")
def login(
    request: Request,
    payload: dict[str, object] = Body(...),
    user_id: str = Depends(current_user_id),
) -> dict[str, object]:
    """Store the verified profile claims for the caller."""
    claims = parse_body(UserLogin, payload, "Invalid user data")
    if claims.id != user_id:
        raise ApiError(status.HTTP_403_FORBIDDEN, "User id does not match identity")
    container: AppContainer = request.app.state.container
    try:
        user = container.user_service.upsert_user(claims.to_payload())
    except Exception as exc:
        logger.exception("Failed to upsert user", extra={"user_id": user_id})
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to save user"
        ) from exc
    return serialize_user(user)


@router.get("/user")
def get_user(
    request: Request, user_id: str = Depends(current_user_id)
) -> dict[str, object] | None:
    """Return the caller's stored profile, or null."""
    container: AppContainer = request.app.state.container
    try:
        user = container.user_service.get_user(user_id)
    except Exception as exc:
        logger.exception("Failed to fetch user", extra={"user_id": user_id})
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch user"
        ) from exc
    return serialize_user(user) if user else None
