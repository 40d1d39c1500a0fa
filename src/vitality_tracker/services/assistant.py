"""Generative assistant call sites: food parsing and coaching."""

import logging
from dataclasses import dataclass, field
from datetime import date

from pydantic import ValidationError

from vitality_tracker.domain.assistant import (
    AssistantReply,
    CoachAdvice,
    CoachingSnapshot,
    HabitDay,
    ParsedFood,
)
from vitality_tracker.domain.logs import FoodDraft
from vitality_tracker.services.generation import RetryingGenerator
from vitality_tracker.services.logs import LogStore
from vitality_tracker.services.profile import ProfileService
from vitality_tracker.services.stats import StatsService

FOOD_PARSER_INSTRUCTION = (
    "You are a nutritionist. Turn the food description into a JSON object with "
    'the keys "name" (short string), "cals" (integer kcal) and "protein" '
    "(integer grams). Assume typical portions when none are given. "
    'Example: {"name": "Paneer Wrap", "cals": 420, "protein": 22}. '
    "Reply with JSON only."
)

COACH_INSTRUCTION = (
    "You are a strict but supportive fitness coach. Read the JSON progress data "
    'and reply with a JSON object holding a single "message" field: one or two '
    "short, specific sentences about what the user is neglecting most."
)

BUSY_NOTIFICATION = "Still working on the previous request."
EMPTY_DESCRIPTION_NOTIFICATION = "Describe what you ate first."
FOOD_SERVICE_NOTIFICATION = "AI Error. Check connection."
FOOD_UNKNOWN_NOTIFICATION = "Could not identify food. Try again."
COACH_OFFLINE_NOTIFICATION = "Coach is offline currently."

_logger = logging.getLogger(__name__)


@dataclass
class FoodParser:
    """Parses free-text food descriptions into food log entries."""

    generator: RetryingGenerator
    logs: LogStore
    _in_flight: bool = field(default=False, init=False, repr=False)

    async def parse_and_log(self, description: str, day: date) -> AssistantReply:
        """Estimate a described food and append it to the day's log."""
        text = description.strip()
        if not text:
            return AssistantReply(ok=False, notification=EMPTY_DESCRIPTION_NOTIFICATION)
        if self._in_flight:
            return AssistantReply(ok=False, notification=BUSY_NOTIFICATION)

        self._in_flight = True
        try:
            raw = await self.generator.call(
                f'Food description: "{text}". Estimate calories and protein.',
                FOOD_PARSER_INSTRUCTION,
            )
        except Exception:
            _logger.exception("Food parse request failed")
            return AssistantReply(ok=False, notification=FOOD_SERVICE_NOTIFICATION)
        finally:
            self._in_flight = False

        try:
            parsed = ParsedFood.model_validate(raw)
        except ValidationError as exc:
            _logger.warning("Food parse reply rejected: %s", exc)
            return AssistantReply(ok=False, notification=FOOD_UNKNOWN_NOTIFICATION)

        food = self.logs.append_food(
            day,
            FoodDraft(name=parsed.name, calories=parsed.cals, protein_g=parsed.protein),
        )
        return AssistantReply(ok=True, notification=f"Added {food.name}", food=food)


@dataclass
class Coach:
    """Requests a short coaching message from a progress snapshot."""

    generator: RetryingGenerator
    profiles: ProfileService
    stats: StatsService
    _in_flight: bool = field(default=False, init=False, repr=False)

    def snapshot(self, today: date) -> CoachingSnapshot:
        """Build the progress snapshot sent to the coach."""
        summary = self.stats.summary(today)
        return CoachingSnapshot(
            current_weight=summary.current_weight,
            days_left=summary.days_remaining,
            total_lost=summary.total_lost,
            recent_habits=[
                HabitDay(
                    date=entry.day.isoformat(),
                    workout=entry.workout,
                    no_sugar=entry.no_sugar,
                    low_salt=entry.low_salt,
                    vacuums=entry.vacuums,
                )
                for entry in self.stats.recent_entries(7)
            ],
            today_cals=summary.today_calories,
            target_cals=summary.calorie_goal,
        )

    async def advise(self, today: date) -> AssistantReply:
        """Return a coaching message, or an offline notification."""
        if self._in_flight:
            return AssistantReply(ok=False, notification=BUSY_NOTIFICATION)

        profile = self.profiles.profile
        snapshot = self.snapshot(today)
        prompt = (
            f"Progress data: {snapshot.model_dump_json()}. "
            f"Goal: reach {profile.goal_weight}kg by {profile.end_date.isoformat()}. "
            f"Current daily calorie goal: {snapshot.target_cals}."
        )
        self._in_flight = True
        try:
            raw = await self.generator.call(prompt, COACH_INSTRUCTION)
            advice = CoachAdvice.model_validate(raw)
        except Exception:
            _logger.exception("Coaching request failed")
            return AssistantReply(ok=False, notification=COACH_OFFLINE_NOTIFICATION)
        finally:
            self._in_flight = False
        return AssistantReply(
            ok=True, notification="Coach replied", message=advice.message
        )
