"""Key-value persistence abstractions."""

import logging
from dataclasses import dataclass
from typing import Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

SETTINGS_KEY = "vitality_settings"
DAILY_LOGS_KEY = "vitality_daily_logs"
FOOD_LOGS_KEY = "vitality_food_logs"

T = TypeVar("T")

_logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Opaque persistence interface for serialized blobs."""

    def load(self, key: str) -> str | None:
        """Return the stored blob for a key, if present."""

    def save(self, key: str, blob: str) -> None:
        """Store a blob under a key, replacing any previous value."""

    def delete(self, key: str) -> None:
        """Remove a key if it exists."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory store used for tests and ephemeral sessions."""

    _blobs: dict[str, str]

    def __init__(self) -> None:
        self._blobs = {}

    def load(self, key: str) -> str | None:
        """Return the stored blob, if any."""
        return self._blobs.get(key)

    def save(self, key: str, blob: str) -> None:
        """Store the blob."""
        self._blobs[key] = blob

    def delete(self, key: str) -> None:
        """Drop the blob."""
        self._blobs.pop(key, None)


def decode_blob(blob: str | None, adapter: TypeAdapter[T], key: str) -> T | None:
    """Decode a stored blob, returning None when missing or unreadable."""
    if blob is None:
        return None
    try:
        return adapter.validate_json(blob)
    except ValidationError as exc:
        _logger.warning("Discarding unreadable blob for %s: %s", key, exc)
        return None


def encode_blob(value: T, adapter: TypeAdapter[T]) -> str:
    """Serialize a value to a JSON blob."""
    return adapter.dump_json(value).decode("utf-8")
