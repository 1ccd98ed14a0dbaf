"""Food entry logging service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from macro_tracker.domain.entries import FoodEntry, FoodEntryWithFood
from macro_tracker.domain.models import NotFoundError

logger = logging.getLogger(__name__)


class FoodEntryRepository(Protocol):
    """Persistence interface for food entries."""

    def list_entries_for_date(
        self, user_id: str, entry_date: date
    ) -> list[FoodEntryWithFood]:
        """Return a day's entries joined with foods, most recent first."""

    def list_entries_between(
        self, user_id: str, start: date, end: date
    ) -> list[FoodEntryWithFood]:
        """Return entries joined with foods for an inclusive date range."""

    def create_entry(self, user_id: str, payload: dict[str, object]) -> FoodEntry:
        """Create an entry and return it."""

    def update_entry(
        self, user_id: str, entry_id: int, payload: dict[str, object]
    ) -> FoodEntry | None:
        """Update an owned entry, returning None when nothing matched."""

    def delete_entry(self, user_id: str, entry_id: int) -> bool:
        """Delete an owned entry, returning whether a row was removed."""


@dataclass
class FoodEntryService:
    """Service for the per-user food entry log."""

    repository: FoodEntryRepository

    def get_by_date(self, user_id: str, entry_date: date) -> list[FoodEntryWithFood]:
        """Return entries logged under a date bucket."""
        return self.repository.list_entries_for_date(user_id, entry_date)

    def get_between(
        self, user_id: str, start: date, end: date
    ) -> list[FoodEntryWithFood]:
        """Return entries for an inclusive date range, oldest date first."""
        return self.repository.list_entries_between(user_id, start, end)

    def create(self, user_id: str, payload: dict[str, object]) -> FoodEntry:
        """Log a new entry for the user."""
        entry = self.repository.create_entry(user_id, payload)
        logger.info(
            "Food entry created",
            extra={"user_id": user_id, "entry_id": entry.id, "food_id": entry.food_id},
        )
        return entry

    def update(
        self, user_id: str, entry_id: int, payload: dict[str, object]
    ) -> FoodEntry:
        """Apply a partial update to an entry the user owns."""
        entry = self.repository.update_entry(user_id, entry_id, payload)
        if entry is None:
            raise NotFoundError(f"Food entry {entry_id} not found")
        return entry

    def delete(self, user_id: str, entry_id: int) -> None:
        """Delete an entry the user owns."""
        if not self.repository.delete_entry(user_id, entry_id):
            raise NotFoundError(f"Food entry {entry_id} not found")
        logger.info(
            "Food entry deleted", extra={"user_id": user_id, "entry_id": entry_id}
        )
