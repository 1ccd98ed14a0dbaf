"""Helpers for parsing Supabase rows."""

from datetime import date, datetime
from decimal import Decimal

from macro_tracker.domain.entries import FoodEntry
from macro_tracker.domain.foods import Food


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp column, returning None when empty."""
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def parse_decimal(raw: object) -> Decimal:
    """Parse a numeric column. Missing values count as zero."""
    if raw is None or raw == "":
        return Decimal(0)
    return Decimal(str(raw))


def parse_food(row: dict[str, object]) -> Food:
    """Parse a foods row into a domain model."""
    return Food(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        calories_per_serving=parse_decimal(row.get("calories_per_serving")),
        protein_per_serving=parse_decimal(row.get("protein_per_serving")),
        carbs_per_serving=parse_decimal(row.get("carbs_per_serving")),
        fat_per_serving=parse_decimal(row.get("fat_per_serving")),
        serving_size=row.get("serving_size"),
        is_common=bool(row.get("is_common", False)),
        created_at=parse_timestamp(row.get("created_at")),
    )


def parse_entry(row: dict[str, object]) -> FoodEntry:
    """Parse a food_entries row into a domain model."""
    return FoodEntry(
        id=int(row["id"]),
        user_id=str(row["user_id"]),
        food_id=int(row["food_id"]),
        servings=parse_decimal(row.get("servings")),
        meal_type=str(row.get("meal_type", "")),
        consumed_at=datetime.fromisoformat(str(row["consumed_at"])),
        entry_date=date.fromisoformat(str(row["entry_date"])),
        created_at=parse_timestamp(row.get("created_at")),
    )
