"""Tests for profile service."""

from dataclasses import replace

from vitality_tracker.domain.profile import DEFAULT_PROFILE
from vitality_tracker.services.profile import ProfileService
from vitality_tracker.services.storage import SETTINGS_KEY, InMemoryKeyValueStore


def test_load_defaults_when_missing() -> None:
    service = ProfileService.load(InMemoryKeyValueStore())

    assert service.profile == DEFAULT_PROFILE


def test_update_persists_profile() -> None:
    store = InMemoryKeyValueStore()
    service = ProfileService.load(store)
    updated = replace(DEFAULT_PROFILE, name="Asha", goal_weight=88.5)

    service.update(updated)

    assert ProfileService.load(store).profile == updated


def test_corrupt_profile_falls_back_to_default() -> None:
    store = InMemoryKeyValueStore()
    store.save(SETTINGS_KEY, '{"name": "Asha"}')

    assert ProfileService.load(store).profile == DEFAULT_PROFILE


def test_reset_deletes_stored_profile() -> None:
    store = InMemoryKeyValueStore()
    service = ProfileService.load(store)
    service.update(replace(DEFAULT_PROFILE, name="Asha"))

    profile = service.reset()

    assert profile == DEFAULT_PROFILE
    assert store.load(SETTINGS_KEY) is None
