"""Daily goal endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Body, Depends, Request, status

from macro_tracker.api.dependencies import current_user_id
from macro_tracker.api.errors import ApiError, parse_body
from macro_tracker.api.models import GoalsUpdate
from macro_tracker.api.serializers import serialize_goals

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/goals", tags=["goals"])


@router.get("")
def get_goals(
    request: Request, user_id: str = Depends(current_user_id)
) -> dict[str, object]:
    """Return stored goals or the default targets."""
    container: AppContainer = request.app.state.container
    try:
        goals = container.goals_service.get_or_default(user_id)
    except Exception as exc:
        logger.exception("Failed to fetch goals", extra={"user_id": user_id})
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch goals"
        ) from exc
    return serialize_goals(goals)


@router.post("")
def update_goals(
    request: Request,
    payload: dict[str, object] = Body(...),
    user_id: str = Depends(current_user_id),
) -> dict[str, object]:
    """Create or replace the caller's goals."""
    goals_data = parse_body(GoalsUpdate, payload, "Invalid goals data")
    container: AppContainer = request.app.state.container
    try:
        goals = container.goals_service.upsert(user_id, goals_data.to_payload())
    except Exception as exc:
        logger.exception("Failed to update goals", extra={"user_id": user_id})
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update goals"
        ) from exc
    return serialize_goals(goals)
