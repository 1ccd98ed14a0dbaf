"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from macro_tracker.api.app import create_app
from macro_tracker.config import Settings
from macro_tracker.containers import AppContainer
from macro_tracker.domain.entries import FoodEntry, FoodEntryWithFood
from macro_tracker.domain.foods import Food
from macro_tracker.domain.goals import UserGoals
from macro_tracker.domain.models import UserRecord
from macro_tracker.services.entries import FoodEntryRepository, FoodEntryService
from macro_tracker.services.foods import FoodCatalogService, FoodRepository
from macro_tracker.services.goals import GoalsRepository, GoalsService
from macro_tracker.services.stats import StatsService
from macro_tracker.services.users import UserRepository, UserService

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[str, UserRecord] = field(default_factory=dict)

    def get_user(self, user_id: str) -> UserRecord | None:
        return self.users.get(user_id)

    def upsert_user(self, payload: dict[str, object]) -> UserRecord:
        now = datetime.now(tz=UTC)
        current = self.users.get(str(payload["id"]))
        user = UserRecord(
            id=str(payload["id"]),
            email=payload.get("email", current.email if current else None),
            first_name=payload.get(
                "first_name", current.first_name if current else None
            ),
            last_name=payload.get("last_name", current.last_name if current else None),
            profile_image_url=payload.get(
                "profile_image_url", current.profile_image_url if current else None
            ),
            created_at=current.created_at if current else now,
            updated_at=now,
        )
        self.users[user.id] = user
        return user


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food catalog for tests."""

    foods: dict[int, Food] = field(default_factory=dict)

    def create_food(self, payload: dict[str, object]) -> Food:
        food = Food(
            id=len(self.foods) + 1,
            name=str(payload["name"]),
            calories_per_serving=Decimal(str(payload["calories_per_serving"])),
            protein_per_serving=Decimal(str(payload.get("protein_per_serving", 0))),
            carbs_per_serving=Decimal(str(payload.get("carbs_per_serving", 0))),
            fat_per_serving=Decimal(str(payload.get("fat_per_serving", 0))),
            serving_size=payload.get("serving_size"),
            is_common=bool(payload.get("is_common", False)),
            created_at=datetime.now(tz=UTC),
        )
        self.foods[food.id] = food
        return food

    def get_food(self, food_id: int) -> Food | None:
        return self.foods.get(food_id)

    def search_foods(self, query: str, limit: int) -> list[Food]:
        matches = [
            food for food in self.foods.values() if query.lower() in food.name.lower()
        ]
        return sorted(matches, key=lambda food: (not food.is_common, food.id))[:limit]

    def list_common_foods(self, limit: int) -> list[Food]:
        common = [food for food in self.foods.values() if food.is_common]
        return sorted(common, key=lambda food: food.name)[:limit]


@dataclass
class InMemoryGoalsRepository(GoalsRepository):
    """In-memory goals repository keyed by user id."""

    goals: dict[str, UserGoals] = field(default_factory=dict)
    upserts: int = 0

    def get_goals(self, user_id: str) -> UserGoals | None:
        return self.goals.get(user_id)

    def upsert_goals(self, user_id: str, payload: dict[str, object]) -> UserGoals:
        self.upserts += 1
        now = datetime.now(tz=UTC)
        current = self.goals.get(user_id)
        goals = UserGoals(
            id=current.id if current else len(self.goals) + 1,
            user_id=user_id,
            daily_calories=int(payload["daily_calories"]),
            daily_protein=int(payload["daily_protein"]),
            daily_carbs=int(payload["daily_carbs"]),
            daily_fat=int(payload["daily_fat"]),
            weight_goal=str(payload.get("weight_goal", "maintain")),
            created_at=current.created_at if current else now,
            updated_at=now,
        )
        self.goals[user_id] = goals
        return goals


@dataclass
class InMemoryFoodEntryRepository(FoodEntryRepository):
    """In-memory entry log joined against an in-memory catalog."""

    food_repository: InMemoryFoodRepository
    entries: dict[int, FoodEntry] = field(default_factory=dict)
    next_id: int = 1

    def list_entries_for_date(
        self, user_id: str, entry_date: date
    ) -> list[FoodEntryWithFood]:
        rows = [
            row
            for row in self._joined(user_id)
            if row.entry.entry_date == entry_date
        ]
        return sorted(rows, key=lambda row: row.entry.consumed_at, reverse=True)

    def list_entries_between(
        self, user_id: str, start: date, end: date
    ) -> list[FoodEntryWithFood]:
        rows = [
            row
            for row in self._joined(user_id)
            if start <= row.entry.entry_date <= end
        ]
        return sorted(rows, key=lambda row: row.entry.entry_date)

    def create_entry(self, user_id: str, payload: dict[str, object]) -> FoodEntry:
        food_id = int(payload["food_id"])
        if food_id not in self.food_repository.foods:
            raise RuntimeError("violates foreign key constraint")
        entry = FoodEntry(
            id=self.next_id,
            user_id=user_id,
            food_id=food_id,
            servings=Decimal(str(payload["servings"])),
            meal_type=str(payload["meal_type"]),
            consumed_at=_as_datetime(payload["consumed_at"]),
            entry_date=_as_date(payload["entry_date"]),
            created_at=datetime.now(tz=UTC),
        )
        self.entries[entry.id] = entry
        self.next_id += 1
        return entry

    def update_entry(
        self, user_id: str, entry_id: int, payload: dict[str, object]
    ) -> FoodEntry | None:
        current = self.entries.get(entry_id)
        if current is None or current.user_id != user_id:
            return None
        changes: dict[str, object] = {}
        if "food_id" in payload:
            changes["food_id"] = int(payload["food_id"])
        if "servings" in payload:
            changes["servings"] = Decimal(str(payload["servings"]))
        if "meal_type" in payload:
            changes["meal_type"] = str(payload["meal_type"])
        if "consumed_at" in payload:
            changes["consumed_at"] = _as_datetime(payload["consumed_at"])
        if "entry_date" in payload:
            changes["entry_date"] = _as_date(payload["entry_date"])
        updated = replace(current, **changes)
        self.entries[entry_id] = updated
        return updated

    def delete_entry(self, user_id: str, entry_id: int) -> bool:
        current = self.entries.get(entry_id)
        if current is None or current.user_id != user_id:
            return False
        del self.entries[entry_id]
        return True

    def _joined(self, user_id: str) -> list[FoodEntryWithFood]:
        rows = []
        for entry in self.entries.values():
            food = self.food_repository.foods.get(entry.food_id)
            if entry.user_id == user_id and food is not None:
                rows.append(FoodEntryWithFood(entry=entry, food=food))
        return rows


class FailingRepository:
    """Repository double whose every call raises, standing in for a store outage."""

    def __getattr__(self, name: str):  # type: ignore[no-untyped-def]
        def _fail(*_args, **_kwargs):  # type: ignore[no-untyped-def]
            raise RuntimeError("connection refused")

        return _fail


def _as_datetime(value: object) -> datetime:
    return value if isinstance(value, datetime) else datetime.fromisoformat(str(value))


def _as_date(value: object) -> date:
    return value if isinstance(value, date) else date.fromisoformat(str(value))


def build_test_container(settings: Settings) -> AppContainer:
    """Build a container wired to in-memory repositories."""
    food_repository = InMemoryFoodRepository()
    goals_service = GoalsService(InMemoryGoalsRepository())
    food_entry_service = FoodEntryService(InMemoryFoodEntryRepository(food_repository))
    return AppContainer(
        settings=settings,
        user_service=UserService(InMemoryUserRepository()),
        food_catalog_service=FoodCatalogService(food_repository),
        goals_service=goals_service,
        food_entry_service=food_entry_service,
        stats_service=StatsService(entries=food_entry_service, goals=goals_service),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_test_container(settings)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-User-Id": USER_ID}
