"""Profile domain models."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ProfileSettings:
    """Challenge configuration and body metrics."""

    name: str
    start_weight: float
    goal_weight: float
    start_date: date
    end_date: date
    height_cm: float
    age: float
    gender: str = "male"


DEFAULT_PROFILE = ProfileSettings(
    name="Vivek Pandey",
    start_weight=98.0,
    goal_weight=91.0,
    start_date=date(2025, 12, 17),
    end_date=date(2026, 1, 20),
    height_cm=177.0,
    age=28.0,
    gender="male",
)
