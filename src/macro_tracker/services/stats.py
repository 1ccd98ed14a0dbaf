"""Statistics service for food entries."""

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from macro_tracker.domain.entries import FoodEntryWithFood
from macro_tracker.domain.goals import DEFAULT_CALORIE_GOAL
from macro_tracker.domain.stats import DailyStats, WeeklyProgress
from macro_tracker.services.entries import FoodEntryService
from macro_tracker.services.goals import GoalsService


@dataclass(frozen=True)
class MacroTotals:
    """Unrounded macro sums."""

    calories: Decimal
    protein: Decimal
    carbs: Decimal
    fat: Decimal


@dataclass
class StatsService:
    """Service deriving daily and weekly reports from logged entries."""

    entries: FoodEntryService
    goals: GoalsService

    def daily_stats(self, user_id: str, day: date) -> DailyStats:
        """Return the day's macro totals, rounded once after summing."""
        totals = _sum_entries(self.entries.get_by_date(user_id, day))
        return DailyStats(
            day=day,
            calories=round_half_up(totals.calories),
            protein=round_half_up(totals.protein),
            carbs=round_half_up(totals.carbs),
            fat=round_half_up(totals.fat),
        )

    def weekly_progress(
        self, user_id: str, start: date, end: date
    ) -> list[WeeklyProgress]:
        """Return per-date calories against the calorie goal.

        Only dates with at least one entry are reported.
        """
        goals = self.goals.get_or_default(user_id)
        goal = Decimal(goals.daily_calories or DEFAULT_CALORIE_GOAL)
        by_day: dict[date, list[FoodEntryWithFood]] = {}
        for row in self.entries.get_between(user_id, start, end):
            by_day.setdefault(row.entry.entry_date, []).append(row)

        progress = []
        for day in sorted(by_day):
            calories = _sum_entries(by_day[day]).calories
            progress.append(
                WeeklyProgress(
                    day=day,
                    calories=round_half_up(calories),
                    percentage=round_half_up(calories * 100 / goal),
                )
            )
        return progress


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer with ties away from zero."""
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _sum_entries(rows: list[FoodEntryWithFood]) -> MacroTotals:
    calories = protein = carbs = fat = Decimal(0)
    for row in rows:
        servings = row.entry.servings
        calories += row.food.calories_per_serving * servings
        protein += row.food.protein_per_serving * servings
        carbs += row.food.carbs_per_serving * servings
        fat += row.food.fat_per_serving * servings
    return MacroTotals(calories=calories, protein=protein, carbs=carbs, fat=fat)
