"""Progress statistics derived from logs and profile."""

from dataclasses import dataclass
from datetime import date

from vitality_tracker.domain.logs import DailyEntry
from vitality_tracker.domain.projection import ProgressSummary, ProjectedDay
from vitality_tracker.services.goals import daily_calorie_goal
from vitality_tracker.services.logs import LogStore
from vitality_tracker.services.profile import ProfileService
from vitality_tracker.services.projection import build_projection, round_one_decimal


@dataclass
class StatsService:
    """Recomputes derived numbers on every read."""

    profiles: ProfileService
    logs: LogStore

    def current_weight(self) -> float:
        """Return the latest logged weight or the start weight."""
        return self.logs.latest_weight(self.profiles.profile.start_weight)

    def calorie_goal(self) -> int:
        """Return the calorie goal for the current weight."""
        profile = self.profiles.profile
        return daily_calorie_goal(
            self.current_weight(), profile.height_cm, profile.age
        )

    def projection(self) -> list[ProjectedDay]:
        """Return the full projection for the challenge window."""
        return build_projection(
            self.profiles.profile, self.logs.entries, self.logs.foods
        )

    def recent_entries(self, limit: int = 7) -> list[DailyEntry]:
        """Return the most recent daily entries."""
        return self.logs.recent_entries(limit)

    def summary(self, today: date) -> ProgressSummary:
        """Return dashboard totals for a day."""
        profile = self.profiles.profile
        current = self.current_weight()
        goal = self.calorie_goal()
        foods = self.logs.foods_for(today)
        calories = sum(food.calories for food in foods)
        return ProgressSummary(
            current_weight=current,
            total_lost=round_one_decimal(profile.start_weight - current),
            days_remaining=(profile.end_date - today).days,
            today_calories=calories,
            today_protein_g=sum(food.protein_g for food in foods),
            calorie_goal=goal,
            remaining_calories=max(0, goal - calories),
            over_goal=calories > goal,
        )
