"""Day-by-day progress projection."""

from collections.abc import Iterable
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

from vitality_tracker.domain.logs import DailyEntry, FoodEntry
from vitality_tracker.domain.profile import ProfileSettings
from vitality_tracker.domain.projection import ProjectedDay


def build_projection(
    profile: ProfileSettings,
    entries: Iterable[DailyEntry],
    foods: dict[date, list[FoodEntry]],
) -> list[ProjectedDay]:
    """Return one record per date from start to end date inclusive."""
    if profile.start_date > profile.end_date:
        return []

    by_day = {entry.day: entry for entry in entries}
    total_days = (profile.end_date - profile.start_date).days or 1
    projection: list[ProjectedDay] = []
    for offset in range((profile.end_date - profile.start_date).days + 1):
        day = profile.start_date + timedelta(days=offset)
        entry = by_day.get(day)
        projection.append(
            ProjectedDay(
                day=day,
                actual_weight=entry.weight if entry else None,
                ideal_weight=ideal_weight(profile, offset, total_days),
                calories=sum(food.calories for food in foods.get(day, [])),
                habit_score=entry.habit_score if entry else 0,
            )
        )
    return projection


def ideal_weight(profile: ProfileSettings, days_passed: int, total_days: int) -> float:
    """Interpolate between start and goal weight by elapsed time."""
    total_days = total_days or 1
    drop = (profile.start_weight - profile.goal_weight) * (days_passed / total_days)
    return round_one_decimal(profile.start_weight - drop)


def round_one_decimal(value: float) -> float:
    """Round half-up to one decimal place."""
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
