"""Directory-backed key-value store."""

import logging
from dataclasses import dataclass
from pathlib import Path

from vitality_tracker.services.storage import KeyValueStore

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileKeyValueStore(KeyValueStore):
    """Stores each key as a JSON file inside a directory."""

    directory: Path

    @classmethod
    def create(cls, directory: str) -> "JsonFileKeyValueStore":
        """Create a store, making the directory if needed."""
        path = Path(directory)
        path.mkdir(parents=True, exist_ok=True)
        return cls(directory=path)

    def load(self, key: str) -> str | None:
        """Return the file contents for a key; undecodable files read as missing."""
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            _logger.warning("Discarding undecodable file for %s: %s", key, exc)
            return None

    def save(self, key: str, blob: str) -> None:
        """Write the blob via a temp file and rename it into place."""
        path = self._path(key)
        tmp_path = path.with_suffix(".tmp")
        tmp_path.write_text(blob, encoding="utf-8")
        tmp_path.replace(path)

    def delete(self, key: str) -> None:
        """Remove the file for a key."""
        self._path(key).unlink(missing_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"
