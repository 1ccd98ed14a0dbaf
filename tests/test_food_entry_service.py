"""Tests for the food entry service."""

from datetime import UTC, date, datetime
from decimal import Decimal

import pytest

from macro_tracker.domain.models import NotFoundError
from macro_tracker.services.entries import FoodEntryService
from tests.conftest import (
    OTHER_USER_ID,
    USER_ID,
    InMemoryFoodEntryRepository,
    InMemoryFoodRepository,
)


def _service() -> tuple[FoodEntryService, int]:
    foods = InMemoryFoodRepository()
    food = foods.create_food({"name": "Toast", "calories_per_serving": "80"})
    return FoodEntryService(InMemoryFoodEntryRepository(foods)), food.id


def _entry(food_id: int, hour: int, day: str = "2024-01-01") -> dict[str, object]:
    return {
        "food_id": food_id,
        "servings": "1.5",
        "meal_type": "breakfast",
        "consumed_at": datetime(2024, 1, 1, hour, tzinfo=UTC).isoformat(),
        "entry_date": day,
    }


def test_create_then_get_by_date_returns_joined_entry() -> None:
    service, food_id = _service()

    created = service.create(USER_ID, _entry(food_id, 8))
    rows = service.get_by_date(USER_ID, date(2024, 1, 1))

    assert len(rows) == 1
    assert rows[0].entry == created
    assert rows[0].entry.servings == Decimal("1.5")
    assert rows[0].entry.meal_type == "breakfast"
    assert rows[0].food.name == "Toast"


def test_get_by_date_orders_most_recent_first_and_filters_user() -> None:
    service, food_id = _service()
    service.create(USER_ID, _entry(food_id, 7))
    service.create(USER_ID, _entry(food_id, 19))
    service.create(OTHER_USER_ID, _entry(food_id, 12))
    service.create(USER_ID, _entry(food_id, 9, day="2024-01-02"))

    rows = service.get_by_date(USER_ID, date(2024, 1, 1))

    assert [row.entry.consumed_at.hour for row in rows] == [19, 7]


def test_entry_date_is_independent_of_consumed_at() -> None:
    service, food_id = _service()
    service.create(USER_ID, _entry(food_id, 23, day="2024-01-02"))

    assert service.get_by_date(USER_ID, date(2024, 1, 1)) == []
    assert len(service.get_by_date(USER_ID, date(2024, 1, 2))) == 1


def test_create_with_unknown_food_fails() -> None:
    service, _ = _service()

    with pytest.raises(RuntimeError):
        service.create(USER_ID, _entry(404, 8))


def test_update_applies_partial_fields() -> None:
    service, food_id = _service()
    created = service.create(USER_ID, _entry(food_id, 8))

    updated = service.update(USER_ID, created.id, {"servings": "3"})

    assert updated.servings == Decimal(3)
    assert updated.meal_type == created.meal_type


def test_update_missing_or_foreign_entry_raises_not_found() -> None:
    service, food_id = _service()
    created = service.create(USER_ID, _entry(food_id, 8))

    with pytest.raises(NotFoundError):
        service.update(USER_ID, 999, {"servings": "2"})
    with pytest.raises(NotFoundError):
        service.update(OTHER_USER_ID, created.id, {"servings": "2"})


def test_delete_removes_entry_and_rejects_missing() -> None:
    service, food_id = _service()
    created = service.create(USER_ID, _entry(food_id, 8))

    with pytest.raises(NotFoundError):
        service.delete(OTHER_USER_ID, created.id)
    service.delete(USER_ID, created.id)

    assert service.get_by_date(USER_ID, date(2024, 1, 1)) == []
    with pytest.raises(NotFoundError):
        service.delete(USER_ID, created.id)
