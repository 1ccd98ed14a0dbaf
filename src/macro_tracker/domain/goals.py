"""Domain models for daily nutrition goals."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserGoals:
    """Daily calorie and macro targets for a user."""

    user_id: str
    daily_calories: int
    daily_protein: int
    daily_carbs: int
    daily_fat: int
    weight_goal: str
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


DEFAULT_CALORIE_GOAL = 2000


def default_goals(user_id: str) -> UserGoals:
    """Return the read-only fallback goals for a user without a stored row."""
    return UserGoals(
        user_id=user_id,
        daily_calories=DEFAULT_CALORIE_GOAL,
        daily_protein=150,
        daily_carbs=250,
        daily_fat=67,
        weight_goal="maintain",
    )
