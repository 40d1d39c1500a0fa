"""Tracker facade resolving "today" for user actions."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo

from vitality_tracker.domain.logs import DailyEntry, DailyLogDraft, FoodDraft, FoodEntry
from vitality_tracker.domain.profile import ProfileSettings
from vitality_tracker.services.logs import LogStore
from vitality_tracker.services.profile import ProfileService

QUICK_FOODS: tuple[FoodDraft, ...] = (
    FoodDraft(name="3 Boiled Eggs (1 Yolk)", calories=155, protein_g=13),
    FoodDraft(name="Jeera Water + Lemon", calories=10, protein_g=0),
    FoodDraft(name="Grilled Chicken (150g)", calories=250, protein_g=45),
    FoodDraft(name="Multigrain Roti (1)", calories=100, protein_g=3),
    FoodDraft(name="Dal (1 Bowl Thick)", calories=140, protein_g=8),
    FoodDraft(name="Almonds (10)", calories=70, protein_g=2),
    FoodDraft(name="Green Tea", calories=2, protein_g=0),
    FoodDraft(name="Clear Soup (Veg/Chicken)", calories=60, protein_g=4),
)


def local_today(timezone_name: str) -> Callable[[], date]:
    """Return a clock reporting the calendar date in a timezone."""
    tz = ZoneInfo(timezone_name)

    def today() -> date:
        return datetime.now(tz=tz).date()

    return today


@dataclass
class TrackerService:
    """Applies user actions to the current day."""

    profiles: ProfileService
    logs: LogStore
    today: Callable[[], date]

    def today_entry(self) -> DailyEntry:
        """Return today's entry, or a blank one carrying the latest weight."""
        day = self.today()
        existing = self.logs.entry_for(day)
        if existing:
            return existing
        return DailyEntry(
            day=day,
            weight=self.logs.latest_weight(self.profiles.profile.start_weight),
        )

    def save_today(self, draft: DailyLogDraft) -> DailyEntry:
        """Save the daily log under today's date."""
        today_draft = DailyLogDraft(
            day=self.today(),
            weight=draft.weight,
            water=draft.water,
            workout=draft.workout,
            no_sugar=draft.no_sugar,
            low_salt=draft.low_salt,
            vacuums=draft.vacuums,
        )
        return self.logs.upsert_daily_entry(
            today_draft, fallback_weight=self.profiles.profile.start_weight
        )

    def today_foods(self) -> list[FoodEntry]:
        """Return the foods logged today."""
        return self.logs.foods_for(self.today())

    def add_food(self, draft: FoodDraft) -> FoodEntry:
        """Log a food for today."""
        return self.logs.append_food(self.today(), draft)

    def add_quick_food(self, index: int) -> FoodEntry | None:
        """Log one of the preset foods; unknown indexes return None."""
        if not 0 <= index < len(QUICK_FOODS):
            return None
        return self.add_food(QUICK_FOODS[index])

    def remove_food(self, food_id: int) -> bool:
        """Remove a food from today's log."""
        return self.logs.remove_food(self.today(), food_id)

    def update_profile(self, profile: ProfileSettings) -> ProfileSettings:
        """Replace the profile settings."""
        return self.profiles.update(profile)

    def reset_all(self) -> None:
        """Delete all history and settings."""
        profile = self.profiles.reset()
        self.logs.reset(profile)
