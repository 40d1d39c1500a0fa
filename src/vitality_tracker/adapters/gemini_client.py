"""Gemini generateContent client."""

import json
from dataclasses import dataclass

import httpx

from vitality_tracker.services.generation import (
    GenerativeClient,
    MalformedResponseError,
    RateLimitedError,
)

TOO_MANY_REQUESTS = 429


@dataclass
class HttpxGeminiClient(GenerativeClient):
    """Single-attempt Gemini client requesting JSON output."""

    api_key: str
    model: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 30

    @classmethod
    def create(cls, api_key: str, model: str, base_url: str) -> "HttpxGeminiClient":
        """Create a Gemini client with a managed httpx session."""
        return cls(
            api_key=api_key,
            model=model,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
        )

    async def generate_json(self, prompt: str, system_instruction: str) -> object:
        """Request JSON output and decode the first candidate's text."""
        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "systemInstruction": {"parts": [{"text": system_instruction}]},
            "generationConfig": {"responseMimeType": "application/json"},
        }
        response = await self.http_client.post(
            url,
            params={"key": self.api_key},
            json=payload,
            timeout=self.timeout_seconds,
        )
        if response.status_code == TOO_MANY_REQUESTS:
            raise RateLimitedError("Too many requests")
        response.raise_for_status()
        text = _candidate_text(response.json())
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedResponseError(f"Candidate text is not JSON: {exc}") from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _candidate_text(envelope: object) -> str:
    """Return candidates[0].content.parts[0].text from a response envelope."""
    try:
        candidate = envelope["candidates"][0]  # type: ignore[index]
        text = candidate["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise MalformedResponseError("Gemini response has no candidate text") from exc
    if not isinstance(text, str):
        raise MalformedResponseError("Gemini candidate text is not a string")
    return text
