"""Daily and weekly statistics endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request, status

from macro_tracker.api.dependencies import current_user_id
from macro_tracker.api.errors import ApiError, parse_date
from macro_tracker.api.serializers import (
    serialize_daily_stats,
    serialize_weekly_progress,
)

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("/daily")
def daily_stats(
    request: Request,
    date: str | None = None,
    user_id: str = Depends(current_user_id),
) -> dict[str, object]:
    """Return the caller's macro totals for a date."""
    day = parse_date(date, "Date parameter is required")
    container: AppContainer = request.app.state.container
    try:
        stats = container.stats_service.daily_stats(user_id, day)
    except Exception as exc:
        logger.exception(
            "Failed to fetch daily stats", extra={"user_id": user_id, "day": date}
        )
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch daily stats"
        ) from exc
    return serialize_daily_stats(stats)


@router.get("/weekly")
def weekly_progress(
    request: Request,
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    user_id: str = Depends(current_user_id),
) -> list[dict[str, object]]:
    """Return per-date calorie progress for a date range."""
    message = "startDate and endDate parameters are required"
    start = parse_date(start_date, message)
    end = parse_date(end_date, message)
    container: AppContainer = request.app.state.container
    try:
        progress = container.stats_service.weekly_progress(user_id, start, end)
    except Exception as exc:
        logger.exception(
            "Failed to fetch weekly progress",
            extra={"user_id": user_id, "start": start_date, "end": end_date},
        )
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch weekly progress"
        ) from exc
    return [serialize_weekly_progress(row) for row in progress]
