"""Supabase repository for user goals."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from macro_tracker.adapters.rows import parse_timestamp
from macro_tracker.domain.goals import UserGoals
from macro_tracker.services.goals import GoalsRepository


@dataclass
class SupabaseGoalsRepository(GoalsRepository):
    """Supabase implementation for user goals."""

    client: Client

    def get_goals(self, user_id: str) -> UserGoals | None:
        """Return the stored goals for a user."""
        response = (
            self.client.table("user_goals")
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_goals(response.data[0])

    def upsert_goals(self, user_id: str, payload: dict[str, object]) -> UserGoals:
        """Insert or update the goals row in one statement.

        Relies on the unique constraint on user_goals.user_id.
        """
        response = (
            self.client.table("user_goals")
            .upsert(
                {
                    **payload,
                    "user_id": user_id,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to upsert user goals")
        return _parse_goals(response.data[0])


def _parse_goals(row: dict[str, object]) -> UserGoals:
    return UserGoals(
        id=row.get("id"),
        user_id=str(row["user_id"]),
        daily_calories=int(row.get("daily_calories", 0)),
        daily_protein=int(row.get("daily_protein", 0)),
        daily_carbs=int(row.get("daily_carbs", 0)),
        daily_fat=int(row.get("daily_fat", 0)),
        weight_goal=str(row.get("weight_goal", "maintain")),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
