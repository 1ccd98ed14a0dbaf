"""Daily goals service."""

from dataclasses import dataclass
from typing import Protocol

from macro_tracker.domain.goals import UserGoals, default_goals


class GoalsRepository(Protocol):
    """Persistence interface for user goals."""

    def get_goals(self, user_id: str) -> UserGoals | None:
        """Return the user's goals row if set."""

    def upsert_goals(self, user_id: str, payload: dict[str, object]) -> UserGoals:
        """Insert or update the single goals row for a user."""


@dataclass
class GoalsService:
    """Service for user goals."""

    repository: GoalsRepository

    def get(self, user_id: str) -> UserGoals | None:
        """Return stored goals, if any."""
        return self.repository.get_goals(user_id)

    def get_or_default(self, user_id: str) -> UserGoals:
        """Return stored goals or the fallback defaults without persisting them."""
        return self.repository.get_goals(user_id) or default_goals(user_id)

    def upsert(self, user_id: str, payload: dict[str, object]) -> UserGoals:
        """Persist goals for a user, replacing any existing row."""
        return self.repository.upsert_goals(user_id, payload)
