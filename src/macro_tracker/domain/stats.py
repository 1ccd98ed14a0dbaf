"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyStats:
    """Rounded macro totals for one user on one date."""

    day: date
    calories: int
    protein: int
    carbs: int
    fat: int


@dataclass(frozen=True)
class WeeklyProgress:
    """Calories for one date as a percentage of the calorie goal."""

    day: date
    calories: int
    percentage: int
