"""Domain models for daily logs and food entries."""

from dataclasses import dataclass
from datetime import date

HABIT_POINTS = 25


@dataclass(frozen=True)
class DailyEntry:
    """One calendar day's weight, hydration and habit record."""

    day: date
    weight: float
    water: float = 0.0
    workout: bool = False
    no_sugar: bool = False
    low_salt: bool = False
    vacuums: bool = False

    @property
    def habit_score(self) -> int:
        """Return 25 points per completed habit."""
        flags = (self.workout, self.no_sugar, self.low_salt, self.vacuums)
        return HABIT_POINTS * sum(1 for flag in flags if flag)


@dataclass(frozen=True)
class DailyLogDraft:
    """Raw daily log form values before the weight is resolved."""

    day: date
    weight: object = None
    water: float = 0.0
    workout: bool = False
    no_sugar: bool = False
    low_salt: bool = False
    vacuums: bool = False


@dataclass(frozen=True)
class FoodDraft:
    """Food item awaiting an identifier."""

    name: str
    calories: int
    protein_g: int = 0


@dataclass(frozen=True)
class FoodEntry:
    """Logged food item scoped to a calendar date."""

    id: int
    name: str
    calories: int
    protein_g: int = 0
