"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date

import pytest

from vitality_tracker.config import Settings
from vitality_tracker.containers import AppContainer
from vitality_tracker.services.assistant import Coach, FoodParser
from vitality_tracker.services.generation import (
    BackoffSchedule,
    GenerativeClient,
    RetryingGenerator,
)
from vitality_tracker.services.logs import LogStore
from vitality_tracker.services.profile import ProfileService
from vitality_tracker.services.stats import StatsService
from vitality_tracker.services.storage import InMemoryKeyValueStore
from vitality_tracker.services.tracker import TrackerService

FIXED_TODAY = date(2025, 12, 20)


@dataclass
class FakeGenerativeClient(GenerativeClient):
    """Fake generative client replaying queued replies or errors."""

    outcomes: list[object] = field(default_factory=list)
    calls: list[tuple[str, str]] = field(default_factory=list)

    async def generate_json(self, prompt: str, system_instruction: str) -> object:
        self.calls.append((prompt, system_instruction))
        outcome = self.outcomes.pop(0) if self.outcomes else {}
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@dataclass
class RecordingSleep:
    """Sleep replacement that records requested delays."""

    delays: list[float] = field(default_factory=list)

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


def make_generator(client: FakeGenerativeClient) -> RetryingGenerator:
    return RetryingGenerator(
        client=client, schedule=BackoffSchedule(), sleep=RecordingSleep()
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="gemini-key", storage_backend="memory")


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def profile_service(store: InMemoryKeyValueStore) -> ProfileService:
    return ProfileService.load(store)


@pytest.fixture
def log_store(
    store: InMemoryKeyValueStore, profile_service: ProfileService
) -> LogStore:
    return LogStore.load(store, profile_service.profile)


@pytest.fixture
def generative_client() -> FakeGenerativeClient:
    return FakeGenerativeClient()


@pytest.fixture
def container(
    settings: Settings,
    store: InMemoryKeyValueStore,
    profile_service: ProfileService,
    log_store: LogStore,
    generative_client: FakeGenerativeClient,
) -> AppContainer:
    stats_service = StatsService(profiles=profile_service, logs=log_store)
    generator = make_generator(generative_client)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        store=store,
        profile_service=profile_service,
        log_store=log_store,
        stats_service=stats_service,
        tracker_service=TrackerService(
            profiles=profile_service,
            logs=log_store,
            today=lambda: FIXED_TODAY,
        ),
        food_parser=FoodParser(generator=generator, logs=log_store),
        coach=Coach(
            generator=generator, profiles=profile_service, stats=stats_service
        ),
        close_resources=close_resources,
    )
