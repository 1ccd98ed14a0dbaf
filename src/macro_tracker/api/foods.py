"""Food catalog endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Body, Depends, Request, status

from macro_tracker.api.dependencies import current_user_id
from macro_tracker.api.errors import ApiError, parse_body
from macro_tracker.api.models import FoodCreate
from macro_tracker.api.serializers import serialize_food

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/foods", tags=["foods"], dependencies=[Depends(current_user_id)]
)


@router.get("/search")
def search_foods(request: Request, q: str | None = None) -> list[dict[str, object]]:
    """Search the catalog by name."""
    if not q:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST, "Query parameter 'q' is required"
        )
    container: AppContainer = request.app.state.container
    try:
        foods = container.food_catalog_service.search(q)
    except Exception as exc:
        logger.exception("Failed to search foods", extra={"query": q})
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to search foods"
        ) from exc
    return [serialize_food(food) for food in foods]


@router.get("/common")
def common_foods(request: Request) -> list[dict[str, object]]:
    """Return the common foods list."""
    container: AppContainer = request.app.state.container
    try:
        foods = container.food_catalog_service.get_common_foods()
    except Exception as exc:
        logger.exception("Failed to fetch common foods")
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch common foods"
        ) from exc
    return [serialize_food(food) for food in foods]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_food(
    request: Request, payload: dict[str, object] = Body(...)
) -> dict[str, object]:
    """Add a food to the shared catalog."""
    food_data = parse_body(FoodCreate, payload, "Invalid food data")
    container: AppContainer = request.app.state.container
    try:
        food = container.food_catalog_service.create(food_data.to_payload())
    except Exception as exc:
        logger.exception("Failed to create food", extra={"food_name": food_data.name})
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to create food"
        ) from exc
    return serialize_food(food)
