"""Domain models for food entries."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from macro_tracker.domain.foods import Food

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")


@dataclass(frozen=True)
class FoodEntry:
    """One logged consumption of some servings of a food."""

    id: int
    user_id: str
    food_id: int
    servings: Decimal
    meal_type: str
    consumed_at: datetime
    entry_date: date
    created_at: datetime | None


@dataclass(frozen=True)
class FoodEntryWithFood:
    """Food entry joined with the food it references."""

    entry: FoodEntry
    food: Food
