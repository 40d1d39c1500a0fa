"""Pydantic request models for the tracker API."""

from datetime import date

from pydantic import BaseModel, Field

from vitality_tracker.domain.logs import DailyLogDraft, FoodDraft
from vitality_tracker.domain.profile import ProfileSettings


class ProfilePayload(BaseModel):
    """Settings form payload."""

    name: str
    start_weight: float = Field(gt=0)
    goal_weight: float = Field(gt=0)
    start_date: date
    end_date: date
    height_cm: float = Field(gt=0)
    age: float = Field(gt=0)
    gender: str = "male"

    def to_domain(self) -> ProfileSettings:
        """Convert to the domain profile."""
        return ProfileSettings(
            name=self.name,
            start_weight=self.start_weight,
            goal_weight=self.goal_weight,
            start_date=self.start_date,
            end_date=self.end_date,
            height_cm=self.height_cm,
            age=self.age,
            gender=self.gender,
        )


class DailyLogPayload(BaseModel):
    """Daily log form payload; weight is kept raw."""

    weight: float | str | None = None
    water: float = 0.0
    workout: bool = False
    no_sugar: bool = False
    low_salt: bool = False
    vacuums: bool = False

    def to_draft(self, day: date) -> DailyLogDraft:
        """Convert to a draft for the given day."""
        return DailyLogDraft(
            day=day,
            weight=self.weight,
            water=self.water,
            workout=self.workout,
            no_sugar=self.no_sugar,
            low_salt=self.low_salt,
            vacuums=self.vacuums,
        )


class FoodPayload(BaseModel):
    """Manual food entry."""

    name: str = Field(min_length=1)
    calories: int = Field(ge=0)
    protein_g: int = Field(default=0, ge=0)

    def to_draft(self) -> FoodDraft:
        """Convert to a food draft."""
        return FoodDraft(
            name=self.name, calories=self.calories, protein_g=self.protein_g
        )


class FoodParsePayload(BaseModel):
    """Free-text food description."""

    description: str
