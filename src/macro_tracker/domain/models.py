"""Domain models for the macro tracker."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: str
    email: str | None
    first_name: str | None
    last_name: str | None
    profile_image_url: str | None
    created_at: datetime | None
    updated_at: datetime | None


class NotFoundError(Exception):
    """Raised when a referenced entity does not exist for the caller."""
