"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from fitness_tracker.adapters.supabase_catalog_repository import (
    SupabaseCatalogRepository,
)
from fitness_tracker.adapters.supabase_entry_repository import SupabaseEntryRepository
from fitness_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from fitness_tracker.adapters.supabase_stats_repository import SupabaseStatsRepository
from fitness_tracker.config import Settings
from fitness_tracker.services.catalog import CatalogService
from fitness_tracker.services.entries import EntryLogService
from fitness_tracker.services.profiles import ProfileService
from fitness_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    stats_service: StatsService
    entry_log_service: EntryLogService
    catalog_service: CatalogService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_repository = SupabaseProfileRepository(supabase_client)
    catalog_repository = SupabaseCatalogRepository(supabase_client)
    stats_repository = SupabaseStatsRepository(supabase_client)
    entry_repository = SupabaseEntryRepository(supabase_client)

    return AppContainer(
        settings=resolved_settings,
        profile_service=ProfileService(profile_repository),
        stats_service=StatsService(stats_repository),
        entry_log_service=EntryLogService(
            repository=entry_repository,
            catalog_repository=catalog_repository,
            profile_repository=profile_repository,
        ),
        catalog_service=CatalogService(catalog_repository),
    )
