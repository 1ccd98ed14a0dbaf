"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from macro_tracker.adapters.supabase_food_entry_repository import (
    SupabaseFoodEntryRepository,
)
from macro_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from macro_tracker.adapters.supabase_goals_repository import SupabaseGoalsRepository
from macro_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from macro_tracker.config import Settings
from macro_tracker.services.entries import FoodEntryService
from macro_tracker.services.foods import FoodCatalogService
from macro_tracker.services.goals import GoalsService
from macro_tracker.services.stats import StatsService
from macro_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    food_catalog_service: FoodCatalogService
    goals_service: GoalsService
    food_entry_service: FoodEntryService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    The Supabase client is created once here and shared by every repository.
    """
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(SupabaseUserRepository(supabase_client))
    food_catalog_service = FoodCatalogService(SupabaseFoodRepository(supabase_client))
    goals_service = GoalsService(SupabaseGoalsRepository(supabase_client))
    food_entry_service = FoodEntryService(SupabaseFoodEntryRepository(supabase_client))
    stats_service = StatsService(entries=food_entry_service, goals=goals_service)

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        food_catalog_service=food_catalog_service,
        goals_service=goals_service,
        food_entry_service=food_entry_service,
        stats_service=stats_service,
    )
