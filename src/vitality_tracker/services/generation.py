"""Retrying client for JSON-producing generative calls."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Protocol

_logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """Base error for generative service calls."""


class RateLimitedError(GenerationError):
    """The service answered HTTP 429."""


class MalformedResponseError(GenerationError):
    """The service answered without a parseable JSON payload."""


class GenerativeClient(Protocol):
    """Interface for a single JSON-producing generation attempt."""

    async def generate_json(self, prompt: str, system_instruction: str) -> object:
        """Return the parsed JSON payload of one request."""


@dataclass(frozen=True)
class BackoffSchedule:
    """Bounded exponential backoff."""

    max_attempts: int = 5
    initial_delay_seconds: float = 1.0
    multiplier: float = 2.0

    def delay_after(self, attempt: int) -> float | None:
        """Return the wait after a failed attempt, or None when exhausted."""
        if attempt >= self.max_attempts:
            return None
        return self.initial_delay_seconds * self.multiplier ** (attempt - 1)


@dataclass
class RetryingGenerator:
    """Issues one logical generative request with retries."""

    client: GenerativeClient
    schedule: BackoffSchedule = field(default_factory=BackoffSchedule)
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep

    async def call(self, prompt: str, system_instruction: str = "") -> object:
        """Return the parsed JSON reply, raising the last error when exhausted."""
        attempt = 0
        while True:
            attempt += 1
            try:
                return await self.client.generate_json(prompt, system_instruction)
            except Exception as exc:
                delay = self.schedule.delay_after(attempt)
                _logger.warning(
                    "Generation failed (attempt %s/%s, status=%s): %s",
                    attempt,
                    self.schedule.max_attempts,
                    _status_code_from_exception(exc),
                    exc,
                )
                if delay is None:
                    raise
                await self.sleep(delay)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    if isinstance(exc, RateLimitedError):
        return "429"
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
