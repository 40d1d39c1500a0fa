"""Tests for the log store."""

from datetime import date

from vitality_tracker.domain.logs import DailyEntry, DailyLogDraft, FoodDraft
from vitality_tracker.domain.profile import DEFAULT_PROFILE
from vitality_tracker.services.logs import LogStore, parse_weight
from vitality_tracker.services.storage import (
    DAILY_LOGS_KEY,
    FOOD_LOGS_KEY,
    InMemoryKeyValueStore,
)


def test_load_seeds_start_entry_when_empty() -> None:
    store = LogStore.load(InMemoryKeyValueStore(), DEFAULT_PROFILE)

    assert store.entries == [
        DailyEntry(day=DEFAULT_PROFILE.start_date, weight=DEFAULT_PROFILE.start_weight)
    ]
    assert store.foods == {}


def test_upsert_keeps_one_entry_per_date() -> None:
    store = LogStore(InMemoryKeyValueStore())
    day = date(2025, 12, 18)

    store.upsert_daily_entry(DailyLogDraft(day=day, weight=97.5), fallback_weight=98)
    store.upsert_daily_entry(
        DailyLogDraft(day=day, weight=97.1, workout=True), fallback_weight=98
    )
    store.upsert_daily_entry(
        DailyLogDraft(day=day, weight=97.1, workout=True), fallback_weight=98
    )

    assert len(store.entries) == 1
    assert store.entries[0].weight == 97.1
    assert store.entries[0].workout is True


def test_upsert_sorts_by_date() -> None:
    store = LogStore(InMemoryKeyValueStore())
    for day in (date(2025, 12, 20), date(2025, 12, 18), date(2025, 12, 19)):
        store.upsert_daily_entry(DailyLogDraft(day=day, weight=97), fallback_weight=98)

    assert [entry.day for entry in store.entries] == [
        date(2025, 12, 18),
        date(2025, 12, 19),
        date(2025, 12, 20),
    ]


def test_invalid_weight_falls_back_to_last_other_entry() -> None:
    store = LogStore(InMemoryKeyValueStore())
    store.upsert_daily_entry(
        DailyLogDraft(day=date(2025, 12, 18), weight="96.4"), fallback_weight=98
    )

    entry = store.upsert_daily_entry(
        DailyLogDraft(day=date(2025, 12, 19), weight="abc"), fallback_weight=98
    )

    assert entry.weight == 96.4


def test_invalid_weight_without_history_uses_fallback() -> None:
    store = LogStore(InMemoryKeyValueStore())

    entry = store.upsert_daily_entry(
        DailyLogDraft(day=date(2025, 12, 19), weight=""), fallback_weight=98
    )

    assert entry.weight == 98


def test_upsert_persists_entries() -> None:
    kv = InMemoryKeyValueStore()
    store = LogStore(kv)
    store.upsert_daily_entry(
        DailyLogDraft(day=date(2025, 12, 18), weight=97, no_sugar=True),
        fallback_weight=98,
    )

    reloaded = LogStore.load(kv, DEFAULT_PROFILE)

    assert reloaded.entries == store.entries


def test_latest_weight_uses_last_entry_or_fallback() -> None:
    store = LogStore(InMemoryKeyValueStore())
    assert store.latest_weight(98) == 98

    store.upsert_daily_entry(
        DailyLogDraft(day=date(2025, 12, 19), weight=96), fallback_weight=98
    )
    store.upsert_daily_entry(
        DailyLogDraft(day=date(2025, 12, 18), weight=97), fallback_weight=98
    )

    assert store.latest_weight(98) == 96


def test_append_food_assigns_increasing_ids() -> None:
    store = LogStore(InMemoryKeyValueStore())
    day = date(2025, 12, 18)

    first = store.append_food(day, FoodDraft(name="Dal", calories=140, protein_g=8))
    second = store.append_food(day, FoodDraft(name="Roti", calories=100))

    assert second.id > first.id
    assert [food.name for food in store.foods_for(day)] == ["Dal", "Roti"]
    assert second.protein_g == 0


def test_remove_unknown_food_is_noop() -> None:
    kv = InMemoryKeyValueStore()
    store = LogStore(kv)
    day = date(2025, 12, 18)
    food = store.append_food(day, FoodDraft(name="Dal", calories=140))
    before = kv.load(FOOD_LOGS_KEY)

    removed = store.remove_food(day, food.id + 1000)

    assert removed is False
    assert store.foods_for(day) == [food]
    assert kv.load(FOOD_LOGS_KEY) == before
    assert store.remove_food(date(2030, 1, 1), food.id) is False


def test_remove_food_by_id() -> None:
    store = LogStore(InMemoryKeyValueStore())
    day = date(2025, 12, 18)
    keep = store.append_food(day, FoodDraft(name="Dal", calories=140))
    drop = store.append_food(day, FoodDraft(name="Tea", calories=2))

    assert store.remove_food(day, drop.id) is True
    assert store.foods_for(day) == [keep]


def test_food_log_round_trips_through_store() -> None:
    kv = InMemoryKeyValueStore()
    store = LogStore(kv)
    food = store.append_food(date(2025, 12, 18), FoodDraft(name="Dal", calories=140))

    reloaded = LogStore.load(kv, DEFAULT_PROFILE)

    assert reloaded.foods == {date(2025, 12, 18): [food]}
    new_food = reloaded.append_food(date(2025, 12, 18), FoodDraft("Tea", 2))
    assert new_food.id > food.id


def test_corrupt_blobs_fall_back_to_defaults() -> None:
    kv = InMemoryKeyValueStore()
    kv.save(DAILY_LOGS_KEY, "{not json")
    kv.save(FOOD_LOGS_KEY, '{"2025-12-18": "oops"}')

    store = LogStore.load(kv, DEFAULT_PROFILE)

    assert len(store.entries) == 1
    assert store.entries[0].day == DEFAULT_PROFILE.start_date
    assert store.foods == {}


def test_reset_clears_history() -> None:
    kv = InMemoryKeyValueStore()
    store = LogStore(kv)
    store.append_food(date(2025, 12, 18), FoodDraft(name="Dal", calories=140))

    store.reset(DEFAULT_PROFILE)

    assert kv.load(FOOD_LOGS_KEY) is None
    assert store.foods == {}
    assert store.entries[0].weight == DEFAULT_PROFILE.start_weight


def test_parse_weight_rejects_invalid_values() -> None:
    assert parse_weight("95.2") == 95.2
    assert parse_weight(94) == 94.0
    assert parse_weight("") is None
    assert parse_weight("nan") is None
    assert parse_weight(0) is None
    assert parse_weight(True) is None
    assert parse_weight(None) is None


def test_load_collapses_duplicate_dates_keeping_last() -> None:
    backing = InMemoryKeyValueStore()
    backing.save(
        DAILY_LOGS_KEY,
        '[{"day": "2025-12-18", "weight": 97}, {"day": "2025-12-18", "weight": 96}]',
    )

    store = LogStore.load(backing, DEFAULT_PROFILE)

    assert [entry.weight for entry in store.entries] == [96.0]
    assert store.latest_weight(fallback_weight=98) == 96.0
