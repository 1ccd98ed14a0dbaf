"""Pydantic models for request bodies."""

from datetime import UTC, date, datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

MealType = Literal["breakfast", "lunch", "dinner", "snack"]
WeightGoal = Literal["lose", "maintain", "gain"]


class CamelModel(BaseModel):
    """Base model accepting camelCase keys as well as field names."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    def to_payload(self) -> dict[str, object]:
        """Dump to a store payload with decimals and dates as strings."""
        return self.model_dump(mode="json", exclude_unset=True, exclude_none=True)


class UserLogin(CamelModel):
    """Verified identity claims forwarded by the auth proxy."""

    id: str = Field(min_length=1)
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None


class FoodCreate(CamelModel):
    """Body for creating a catalog food."""

    name: str = Field(min_length=1, max_length=255)
    calories_per_serving: Decimal = Field(ge=0)
    protein_per_serving: Decimal | None = Field(default=None, ge=0)
    carbs_per_serving: Decimal | None = Field(default=None, ge=0)
    fat_per_serving: Decimal | None = Field(default=None, ge=0)
    serving_size: str | None = None
    is_common: bool = False

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(mode="json")


class GoalsUpdate(CamelModel):
    """Body for setting daily goals."""

    daily_calories: int = Field(gt=0)
    daily_protein: int = Field(ge=0)
    daily_carbs: int = Field(ge=0)
    daily_fat: int = Field(ge=0)
    weight_goal: WeightGoal = "maintain"

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(mode="json")


class FoodEntryCreate(CamelModel):
    """Body for logging a food entry."""

    food_id: int = Field(gt=0)
    servings: Decimal = Field(gt=0)
    meal_type: MealType
    consumed_at: datetime = Field(default_factory=lambda: datetime.now(tz=UTC))
    entry_date: date

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(mode="json")


class FoodEntryUpdate(CamelModel):
    """Partial update for a food entry."""

    food_id: int | None = Field(default=None, gt=0)
    servings: Decimal | None = Field(default=None, gt=0)
    meal_type: MealType | None = None
    consumed_at: datetime | None = None
    entry_date: date | None = None

    @model_validator(mode="after")
    def require_a_field(self) -> "FoodEntryUpdate":
        if not self.to_payload():
            raise ValueError("At least one field must be provided")
        return self
