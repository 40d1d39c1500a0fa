"""Dynamic daily calorie goal (Mifflin-St Jeor)."""

import math

ACTIVITY_MULTIPLIER = 1.3
DAILY_DEFICIT_KCAL = 750
MINIMUM_GOAL_KCAL = 1500


def basal_metabolic_rate(weight: float, height_cm: float, age: float) -> float:
    """Return BMR using the male-coefficient Mifflin-St Jeor form."""
    return 10 * weight + 6.25 * height_cm - 5 * age + 5


def daily_calorie_goal(weight: float, height_cm: float, age: float) -> int:
    """Return the deficit calorie target for the current weight."""
    tdee = basal_metabolic_rate(weight, height_cm, age) * ACTIVITY_MULTIPLIER
    return max(MINIMUM_GOAL_KCAL, _round_half_up(tdee - DAILY_DEFICIT_KCAL))


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
