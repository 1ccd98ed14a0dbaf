"""Supabase implementation for the food catalog."""

from dataclasses import dataclass

from supabase import Client

from macro_tracker.adapters.rows import parse_food
from macro_tracker.domain.foods import Food
from macro_tracker.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for catalog foods."""

    client: Client

    def create_food(self, payload: dict[str, object]) -> Food:
        """Create a food and return it."""
        response = self.client.table("foods").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create food")
        return parse_food(response.data[0])

    def get_food(self, food_id: int) -> Food | None:
        """Return a food by id, if present."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("id", food_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food(response.data[0])

    def search_foods(self, query: str, limit: int) -> list[Food]:
        """Search foods by name, common foods first."""
        response = (
            self.client.table("foods")
            .select("*")
            .ilike("name", f"%{escape_like(query)}%")
            .order("is_common", desc=True)
            .order("id", desc=False)
            .limit(limit)
            .execute()
        )
        return [parse_food(row) for row in response.data or []]

    def list_common_foods(self, limit: int) -> list[Food]:
        """Return common foods ordered by name."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("is_common", True)
            .order("name", desc=False)
            .limit(limit)
            .execute()
        )
        return [parse_food(row) for row in response.data or []]


def escape_like(query: str) -> str:
    """Escape LIKE wildcards so the query matches literally."""
    return query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
