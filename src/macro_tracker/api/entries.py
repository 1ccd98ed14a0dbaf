"""Food entry endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Body, Depends, Request, Response, status

from macro_tracker.api.dependencies import current_user_id
from macro_tracker.api.errors import ApiError, parse_body, parse_date
from macro_tracker.api.models import FoodEntryCreate, FoodEntryUpdate
from macro_tracker.api.serializers import serialize_entry, serialize_entry_with_food
from macro_tracker.domain.models import NotFoundError

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/food-entries", tags=["food-entries"])

_NOT_FOUND = "Food entry not found"


@router.get("")
def list_entries(
    request: Request,
    date: str | None = None,
    user_id: str = Depends(current_user_id),
) -> list[dict[str, object]]:
    """Return the caller's entries for one date."""
    entry_date = parse_date(date, "Date parameter is required")
    container: AppContainer = request.app.state.container
    try:
        rows = container.food_entry_service.get_by_date(user_id, entry_date)
    except Exception as exc:
        logger.exception(
            "Failed to fetch food entries",
            extra={"user_id": user_id, "entry_date": date},
        )
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch food entries"
        ) from exc
    return [serialize_entry_with_food(row) for row in rows]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_entry(
    request: Request,
    payload: dict[str, object] = Body(...),
    user_id: str = Depends(current_user_id),
) -> dict[str, object]:
    """Log a food entry for the caller."""
    entry_data = parse_body(FoodEntryCreate, payload, "Invalid entry data")
    container: AppContainer = request.app.state.container
    try:
        entry = container.food_entry_service.create(user_id, entry_data.to_payload())
    except Exception as exc:
        logger.exception(
            "Failed to create food entry",
            extra={"user_id": user_id, "food_id": entry_data.food_id},
        )
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to create food entry"
        ) from exc
    return serialize_entry(entry)


@router.patch("/{entry_id}")
def update_entry(
    entry_id: int,
    request: Request,
    payload: dict[str, object] = Body(...),
    user_id: str = Depends(current_user_id),
) -> dict[str, object]:
    """Partially update one of the caller's entries."""
    updates = parse_body(FoodEntryUpdate, payload, "Invalid entry data")
    container: AppContainer = request.app.state.container
    try:
        entry = container.food_entry_service.update(
            user_id, entry_id, updates.to_payload()
        )
    except NotFoundError as exc:
        raise ApiError(status.HTTP_404_NOT_FOUND, _NOT_FOUND) from exc
    except Exception as exc:
        logger.exception(
            "Failed to update food entry",
            extra={"user_id": user_id, "entry_id": entry_id},
        )
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update food entry"
        ) from exc
    return serialize_entry(entry)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_entry(
    entry_id: int,
    request: Request,
    user_id: str = Depends(current_user_id),
) -> Response:
    """Delete one of the caller's entries."""
    container: AppContainer = request.app.state.container
    try:
        container.food_entry_service.delete(user_id, entry_id)
    except NotFoundError as exc:
        raise ApiError(status.HTTP_404_NOT_FOUND, _NOT_FOUND) from exc
    except Exception as exc:
        logger.exception(
            "Failed to delete food entry",
            extra={"user_id": user_id, "entry_id": entry_id},
        )
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to delete food entry"
        ) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
