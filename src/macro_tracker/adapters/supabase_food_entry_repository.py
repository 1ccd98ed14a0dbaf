"""Supabase repository for food entries."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from macro_tracker.adapters.rows import parse_entry, parse_food
from macro_tracker.domain.entries import FoodEntry, FoodEntryWithFood
from macro_tracker.services.entries import FoodEntryRepository

# Embedded inner join: entries whose food row is missing are dropped.
_JOINED_COLUMNS = "*, food:foods!inner(*)"


@dataclass
class SupabaseFoodEntryRepository(FoodEntryRepository):
    """Supabase implementation for food entries."""

    client: Client

    def list_entries_for_date(
        self, user_id: str, entry_date: date
    ) -> list[FoodEntryWithFood]:
        """Return a day's entries, most recently consumed first."""
        response = (
            self.client.table("food_entries")
            .select(_JOINED_COLUMNS)
            .eq("user_id", user_id)
            .eq("entry_date", entry_date.isoformat())
            .order("consumed_at", desc=True)
            .execute()
        )
        return [_parse_joined(row) for row in response.data or []]

    def list_entries_between(
        self, user_id: str, start: date, end: date
    ) -> list[FoodEntryWithFood]:
        """Return entries dated within [start, end]."""
        response = (
            self.client.table("food_entries")
            .select(_JOINED_COLUMNS)
            .eq("user_id", user_id)
            .gte("entry_date", start.isoformat())
            .lte("entry_date", end.isoformat())
            .order("entry_date", desc=False)
            .execute()
        )
        return [_parse_joined(row) for row in response.data or []]

    def create_entry(self, user_id: str, payload: dict[str, object]) -> FoodEntry:
        """Create an entry row."""
        response = (
            self.client.table("food_entries")
            .insert({**payload, "user_id": user_id})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food entry")
        return parse_entry(response.data[0])

    def update_entry(
        self, user_id: str, entry_id: int, payload: dict[str, object]
    ) -> FoodEntry | None:
        """Update an entry owned by the user."""
        response = (
            self.client.table("food_entries")
            .update(payload)
            .eq("id", entry_id)
            .eq("user_id", user_id)
            .execute()
        )
        if not response.data:
            return None
        return parse_entry(response.data[0])

    def delete_entry(self, user_id: str, entry_id: int) -> bool:
        """Delete an entry owned by the user."""
        response = (
            self.client.table("food_entries")
            .delete()
            .eq("id", entry_id)
            .eq("user_id", user_id)
            .execute()
        )
        return bool(response.data)


def _parse_joined(row: dict[str, object]) -> FoodEntryWithFood:
    return FoodEntryWithFood(entry=parse_entry(row), food=parse_food(row["food"]))
