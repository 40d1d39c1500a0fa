"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from vitality_tracker.adapters.gemini_client import HttpxGeminiClient
from vitality_tracker.adapters.json_file_store import JsonFileKeyValueStore
from vitality_tracker.adapters.supabase_kv_store import SupabaseKeyValueStore
from vitality_tracker.config import Settings
from vitality_tracker.services.assistant import Coach, FoodParser
from vitality_tracker.services.generation import BackoffSchedule, RetryingGenerator
from vitality_tracker.services.logs import LogStore
from vitality_tracker.services.profile import ProfileService
from vitality_tracker.services.stats import StatsService
from vitality_tracker.services.storage import InMemoryKeyValueStore, KeyValueStore
from vitality_tracker.services.tracker import TrackerService, local_today


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: KeyValueStore
    profile_service: ProfileService
    log_store: LogStore
    stats_service: StatsService
    tracker_service: TrackerService
    food_parser: FoodParser
    coach: Coach
    close_resources: Callable[[], Awaitable[None]]


def build_store(settings: Settings) -> KeyValueStore:
    """Create the configured key-value store."""
    if settings.storage_backend == "memory":
        return InMemoryKeyValueStore()
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase storage requires SUPABASE_URL and key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseKeyValueStore(client, table=settings.supabase_table)
    if settings.storage_backend == "file":
        return JsonFileKeyValueStore.create(settings.storage_dir)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = build_store(resolved_settings)
    profile_service = ProfileService.load(store)
    log_store = LogStore.load(store, profile_service.profile)
    stats_service = StatsService(profiles=profile_service, logs=log_store)
    tracker_service = TrackerService(
        profiles=profile_service,
        logs=log_store,
        today=local_today(resolved_settings.timezone),
    )
    gemini_client = HttpxGeminiClient.create(
        api_key=resolved_settings.gemini_api_key,
        model=resolved_settings.gemini_model,
        base_url=resolved_settings.gemini_base_url,
    )
    generator = RetryingGenerator(
        client=gemini_client,
        schedule=BackoffSchedule(
            max_attempts=resolved_settings.ai_max_attempts,
            initial_delay_seconds=resolved_settings.ai_initial_backoff_seconds,
        ),
    )

    async def close_resources() -> None:
        await gemini_client.close()

    return AppContainer(
        settings=resolved_settings,
        store=store,
        profile_service=profile_service,
        log_store=log_store,
        stats_service=stats_service,
        tracker_service=tracker_service,
        food_parser=FoodParser(generator=generator, logs=log_store),
        coach=Coach(
            generator=generator, profiles=profile_service, stats=stats_service
        ),
        close_resources=close_resources,
    )
