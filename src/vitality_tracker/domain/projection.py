"""Derived progress models."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ProjectedDay:
    """Projection row for a single calendar date."""

    day: date
    actual_weight: float | None
    ideal_weight: float
    calories: int
    habit_score: int


@dataclass(frozen=True)
class ProgressSummary:
    """Dashboard totals for the current day."""

    current_weight: float
    total_lost: float
    days_remaining: int
    today_calories: int
    today_protein_g: int
    calorie_goal: int
    remaining_calories: int
    over_goal: bool
