"""JSON serialization for API responses."""

from datetime import datetime

from macro_tracker.domain.entries import FoodEntry, FoodEntryWithFood
from macro_tracker.domain.foods import Food
from macro_tracker.domain.goals import UserGoals
from macro_tracker.domain.models import UserRecord
from macro_tracker.domain.stats import DailyStats, WeeklyProgress


def serialize_user(user: UserRecord) -> dict[str, object]:
    return {
        "id": user.id,
        "email": user.email,
        "firstName": user.first_name,
        "lastName": user.last_name,
        "profileImageUrl": user.profile_image_url,
        "createdAt": _isoformat(user.created_at),
        "updatedAt": _isoformat(user.updated_at),
    }


def serialize_food(food: Food) -> dict[str, object]:
    return {
        "id": food.id,
        "name": food.name,
        "caloriesPerServing": str(food.calories_per_serving),
        "proteinPerServing": str(food.protein_per_serving),
        "carbsPerServing": str(food.carbs_per_serving),
        "fatPerServing": str(food.fat_per_serving),
        "servingSize": food.serving_size,
        "isCommon": food.is_common,
        "createdAt": _isoformat(food.created_at),
    }


def serialize_goals(goals: UserGoals) -> dict[str, object]:
    """Serialize goals; unsaved defaults carry only the target fields."""
    data: dict[str, object] = {
        "dailyCalories": goals.daily_calories,
        "dailyProtein": goals.daily_protein,
        "dailyCarbs": goals.daily_carbs,
        "dailyFat": goals.daily_fat,
        "weightGoal": goals.weight_goal,
    }
    if goals.id is not None:
        data.update(
            {
                "id": goals.id,
                "userId": goals.user_id,
                "createdAt": _isoformat(goals.created_at),
                "updatedAt": _isoformat(goals.updated_at),
            }
        )
    return data


def serialize_entry(entry: FoodEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "userId": entry.user_id,
        "foodId": entry.food_id,
        "servings": str(entry.servings),
        "mealType": entry.meal_type,
        "consumedAt": entry.consumed_at.isoformat(),
        "entryDate": entry.entry_date.isoformat(),
        "createdAt": _isoformat(entry.created_at),
    }


def serialize_entry_with_food(row: FoodEntryWithFood) -> dict[str, object]:
    return {**serialize_entry(row.entry), "food": serialize_food(row.food)}


def serialize_daily_stats(stats: DailyStats) -> dict[str, object]:
    return {
        "date": stats.day.isoformat(),
        "calories": stats.calories,
        "protein": stats.protein,
        "carbs": stats.carbs,
        "fat": stats.fat,
    }


def serialize_weekly_progress(progress: WeeklyProgress) -> dict[str, object]:
    return {
        "date": progress.day.isoformat(),
        "calories": progress.calories,
        "percentage": progress.percentage,
    }


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
