"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol

from macro_tracker.domain.models import UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: str) -> UserRecord | None:
        """Return the user for an id, if present."""

    def upsert_user(self, payload: dict[str, object]) -> UserRecord:
        """Insert or update a user keyed on id and return it."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def get_user(self, user_id: str) -> UserRecord | None:
        """Return the stored profile for the user, if any."""
        return self.repository.get_user(user_id)

    def upsert_user(self, payload: dict[str, object]) -> UserRecord:
        """Create or refresh the user profile from verified login claims."""
        return self.repository.upsert_user(payload)
