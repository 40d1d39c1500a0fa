"""Daily and food log storage."""

import logging
import math
import time
from dataclasses import dataclass, field
from datetime import date

from pydantic import TypeAdapter

from vitality_tracker.domain.logs import DailyEntry, DailyLogDraft, FoodDraft, FoodEntry
from vitality_tracker.domain.profile import ProfileSettings
from vitality_tracker.services.storage import (
    DAILY_LOGS_KEY,
    FOOD_LOGS_KEY,
    KeyValueStore,
    decode_blob,
    encode_blob,
)

_ENTRIES_ADAPTER = TypeAdapter(list[DailyEntry])
_FOODS_ADAPTER = TypeAdapter(dict[date, list[FoodEntry]])

_logger = logging.getLogger(__name__)


@dataclass
class LogStore:
    """Owns the daily entries and the date-keyed food log."""

    store: KeyValueStore
    entries: list[DailyEntry] = field(default_factory=list)
    foods: dict[date, list[FoodEntry]] = field(default_factory=dict)
    _last_food_id: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        # one entry per date; the later duplicate wins
        by_day = {entry.day: entry for entry in self.entries}
        self.entries = sorted(by_day.values(), key=lambda entry: entry.day)
        self._last_food_id = max(
            (food.id for items in self.foods.values() for food in items), default=0
        )

    @classmethod
    def load(cls, store: KeyValueStore, profile: ProfileSettings) -> "LogStore":
        """Load logs from the store, seeding defaults when missing or corrupt."""
        entries = decode_blob(
            store.load(DAILY_LOGS_KEY), _ENTRIES_ADAPTER, DAILY_LOGS_KEY
        )
        foods = decode_blob(store.load(FOOD_LOGS_KEY), _FOODS_ADAPTER, FOOD_LOGS_KEY)
        return cls(
            store=store,
            entries=entries if entries is not None else _seed_entries(profile),
            foods=foods if foods is not None else {},
        )

    def upsert_daily_entry(
        self, draft: DailyLogDraft, fallback_weight: float
    ) -> DailyEntry:
        """Replace the entry for the draft's date and keep entries sorted."""
        remaining = [entry for entry in self.entries if entry.day != draft.day]
        weight = parse_weight(draft.weight)
        if weight is None:
            weight = remaining[-1].weight if remaining else fallback_weight
        entry = DailyEntry(
            day=draft.day,
            weight=float(weight),
            water=float(draft.water),
            workout=draft.workout,
            no_sugar=draft.no_sugar,
            low_salt=draft.low_salt,
            vacuums=draft.vacuums,
        )
        self.entries = sorted([*remaining, entry], key=lambda item: item.day)
        self._save_entries()
        return entry

    def entry_for(self, day: date) -> DailyEntry | None:
        """Return the entry for a date, if logged."""
        for entry in self.entries:
            if entry.day == day:
                return entry
        return None

    def latest_weight(self, fallback_weight: float) -> float:
        """Return the most recent logged weight or the fallback."""
        if not self.entries:
            return fallback_weight
        return self.entries[-1].weight

    def recent_entries(self, limit: int) -> list[DailyEntry]:
        """Return the last entries in chronological order."""
        if limit <= 0:
            return []
        return self.entries[-limit:]

    def foods_for(self, day: date) -> list[FoodEntry]:
        """Return the foods logged on a date."""
        return list(self.foods.get(day, []))

    def append_food(self, day: date, draft: FoodDraft) -> FoodEntry:
        """Append a food to a date and assign it a new id."""
        food = FoodEntry(
            id=self._next_food_id(),
            name=draft.name,
            calories=draft.calories,
            protein_g=draft.protein_g,
        )
        self.foods = {**self.foods, day: [*self.foods.get(day, []), food]}
        self._save_foods()
        return food

    def remove_food(self, day: date, food_id: int) -> bool:
        """Remove a food by id; unknown ids are ignored."""
        current = self.foods.get(day, [])
        kept = [food for food in current if food.id != food_id]
        if len(kept) == len(current):
            return False
        self.foods = {**self.foods, day: kept}
        self._save_foods()
        return True

    def reset(self, profile: ProfileSettings) -> None:
        """Delete all history and restore the seeded defaults."""
        self.store.delete(DAILY_LOGS_KEY)
        self.store.delete(FOOD_LOGS_KEY)
        self.entries = _seed_entries(profile)
        self.foods = {}
        _logger.info("Log history reset")

    def _next_food_id(self) -> int:
        candidate = max(time.time_ns() // 1_000_000, self._last_food_id + 1)
        self._last_food_id = candidate
        return candidate

    def _save_entries(self) -> None:
        self.store.save(DAILY_LOGS_KEY, encode_blob(self.entries, _ENTRIES_ADAPTER))

    def _save_foods(self) -> None:
        self.store.save(FOOD_LOGS_KEY, encode_blob(self.foods, _FOODS_ADAPTER))


def parse_weight(value: object) -> float | None:
    """Parse a weight input, returning None for blank or invalid values."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int | float):
        weight = float(value)
    elif isinstance(value, str):
        try:
            weight = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(weight) or weight <= 0:
        return None
    return weight


def _seed_entries(profile: ProfileSettings) -> list[DailyEntry]:
    return [DailyEntry(day=profile.start_date, weight=profile.start_weight)]
