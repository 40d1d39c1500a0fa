"""Supabase-backed key-value store."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from vitality_tracker.services.storage import KeyValueStore


@dataclass
class SupabaseKeyValueStore(KeyValueStore):
    """Stores blobs as rows of a key/value table."""

    client: Client
    table: str = "app_state"

    def load(self, key: str) -> str | None:
        """Return the stored value for a key."""
        response = (
            self.client.table(self.table)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        value = response.data[0].get("value")
        return value if isinstance(value, str) else None

    def save(self, key: str, blob: str) -> None:
        """Insert or replace the value for a key."""
        self.client.table(self.table).upsert(
            {
                "key": key,
                "value": blob,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).execute()

    def delete(self, key: str) -> None:
        """Delete the row for a key."""
        self.client.table(self.table).delete().eq("key", key).execute()
