"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from vitality_tracker.api.models import (
    DailyLogPayload,
    FoodParsePayload,
    FoodPayload,
    ProfilePayload,
)
from vitality_tracker.app_logging import configure_logging
from vitality_tracker.containers import AppContainer
from vitality_tracker.domain.assistant import AssistantReply
from vitality_tracker.services.tracker import QUICK_FOODS


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    def _container(request: Request) -> AppContainer:
        return request.app.state.container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/dashboard")
    async def dashboard(request: Request) -> dict[str, object]:
        """Return today's totals and the dynamic calorie goal."""
        state = _container(request)
        today = state.tracker_service.today()
        return {
            "date": today,
            "profile": state.profile_service.profile,
            "summary": state.stats_service.summary(today),
            "today": state.tracker_service.today_entry(),
            "foods": state.tracker_service.today_foods(),
        }

    @app.get("/projection")
    async def projection(request: Request) -> dict[str, object]:
        """Return the day-by-day projection."""
        return {"days": _container(request).stats_service.projection()}

    @app.get("/profile")
    async def get_profile(request: Request) -> dict[str, object]:
        """Return profile settings."""
        return {"profile": _container(request).profile_service.profile}

    @app.put("/profile")
    async def put_profile(
        payload: ProfilePayload, request: Request
    ) -> dict[str, object]:
        """Replace profile settings."""
        profile = _container(request).tracker_service.update_profile(
            payload.to_domain()
        )
        return {"profile": profile, "notification": "Settings updated!"}

    @app.put("/logs/today")
    async def save_today(
        payload: DailyLogPayload, request: Request
    ) -> dict[str, object]:
        """Save today's daily log."""
        tracker = _container(request).tracker_service
        entry = tracker.save_today(payload.to_draft(tracker.today()))
        return {"entry": entry, "notification": "Daily log updated!"}

    @app.get("/foods/today")
    async def today_foods(request: Request) -> dict[str, object]:
        """Return today's food log."""
        return {"foods": _container(request).tracker_service.today_foods()}

    @app.post("/foods")
    async def add_food(payload: FoodPayload, request: Request) -> dict[str, object]:
        """Add a manual food entry for today."""
        food = _container(request).tracker_service.add_food(payload.to_draft())
        return {"food": food, "notification": f"Added {food.name}"}

    @app.delete("/foods/{food_id}")
    async def remove_food(food_id: int, request: Request) -> dict[str, bool]:
        """Remove a food entry from today's log."""
        return {"removed": _container(request).tracker_service.remove_food(food_id)}

    @app.get("/foods/quick")
    async def quick_foods() -> dict[str, object]:
        """Return the preset quick-pick foods."""
        return {"foods": list(QUICK_FOODS)}

    @app.post("/foods/quick/{index}")
    async def add_quick_food(index: int, request: Request) -> dict[str, object]:
        """Add a preset food for today."""
        food = _container(request).tracker_service.add_quick_food(index)
        if food is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"food": food, "notification": f"Added {food.name}"}

    @app.post("/foods/parse")
    async def parse_food(
        payload: FoodParsePayload, request: Request
    ) -> AssistantReply:
        """Estimate a described food and log it for today."""
        state = _container(request)
        reply = await state.food_parser.parse_and_log(
            payload.description, state.tracker_service.today()
        )
        if not reply.ok:
            logger.info("Food parse declined: %s", reply.notification)
        return reply

    @app.post("/coach")
    async def coach(request: Request) -> AssistantReply:
        """Ask the coach for advice on current progress."""
        state = _container(request)
        return await state.coach.advise(state.tracker_service.today())

    @app.post("/reset")
    async def reset(request: Request) -> dict[str, str]:
        """Delete all history and settings."""
        _container(request).tracker_service.reset_all()
        logger.info("All tracker data reset")
        return {"status": "ok"}

    return app
