"""Services for the shared food catalog."""

from dataclasses import dataclass
from typing import Protocol

from macro_tracker.domain.foods import Food

SEARCH_LIMIT = 20
COMMON_FOODS_LIMIT = 10


class FoodRepository(Protocol):
    """Persistence interface for the food catalog."""

    def create_food(self, payload: dict[str, object]) -> Food:
        """Create a food and return it with its generated id."""

    def get_food(self, food_id: int) -> Food | None:
        """Return a food by id, if present."""

    def search_foods(self, query: str, limit: int) -> list[Food]:
        """Return foods whose name contains the query, common foods first."""

    def list_common_foods(self, limit: int) -> list[Food]:
        """Return common foods ordered by name."""


@dataclass
class FoodCatalogService:
    """Application service for catalog operations."""

    repository: FoodRepository

    def create(self, payload: dict[str, object]) -> Food:
        """Create a catalog food. Duplicate names are allowed."""
        return self.repository.create_food(_with_default_macros(payload))

    def get_by_id(self, food_id: int) -> Food | None:
        """Return a food by id."""
        return self.repository.get_food(food_id)

    def search(self, query: str) -> list[Food]:
        """Search by case-insensitive name substring."""
        return self._rank(self.repository.search_foods(query, SEARCH_LIMIT))

    def get_common_foods(self) -> list[Food]:
        """Return up to ten common foods alphabetically."""
        return self.repository.list_common_foods(COMMON_FOODS_LIMIT)

    @staticmethod
    def _rank(items: list[Food]) -> list[Food]:
        """Put common foods first, keeping catalog order within each group."""
        return sorted(items, key=lambda item: not item.is_common)


def _with_default_macros(payload: dict[str, object]) -> dict[str, object]:
    resolved = dict(payload)
    for key in ("protein_per_serving", "carbs_per_serving", "fat_per_serving"):
        if resolved.get(key) is None:
            resolved[key] = "0"
    return resolved
