"""Domain models for the shared food catalog."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Food:
    """A catalog food with per-serving macros."""

    id: int
    name: str
    calories_per_serving: Decimal
    protein_per_serving: Decimal
    carbs_per_serving: Decimal
    fat_per_serving: Decimal
    serving_size: str | None
    is_common: bool
    created_at: datetime | None
