"""Models for generative assistant replies."""

import math
from dataclasses import dataclass

from pydantic import BaseModel, Field, field_validator

from vitality_tracker.domain.logs import FoodEntry


class ParsedFood(BaseModel):
    """Food estimate returned by the food parser."""

    name: str = Field(min_length=1)
    cals: int = 0
    protein: int = 0

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: object) -> object:
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("cals", "protein", mode="before")
    @classmethod
    def coerce_amount(cls, value: object) -> int:
        if isinstance(value, bool):
            return 0
        if isinstance(value, str):
            try:
                value = float(value)
            except ValueError:
                return 0
        if isinstance(value, int | float) and math.isfinite(value):
            return max(0, round(value))
        return 0


class CoachAdvice(BaseModel):
    """Coaching reply."""

    message: str = Field(min_length=1)


class HabitDay(BaseModel):
    """Habit flags for one day, as sent to the coach."""

    date: str
    workout: bool
    no_sugar: bool
    low_salt: bool
    vacuums: bool


class CoachingSnapshot(BaseModel):
    """Progress snapshot sent to the coach."""

    current_weight: float
    days_left: int
    total_lost: float
    recent_habits: list[HabitDay]
    today_cals: int
    target_cals: int


@dataclass(frozen=True)
class AssistantReply:
    """Outcome of an assistant call, safe to show to the user."""

    ok: bool
    notification: str
    food: FoodEntry | None = None
    message: str | None = None
