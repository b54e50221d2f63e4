"""Simple file-based key-value storage for recent searches."""

import json
import logging
from pathlib import Path
from typing import Any

from .formatting import format_city_name

logger = logging.getLogger(__name__)

RECENT_SEARCHES_KEY = "recentSearches"
DEFAULT_RECENT_LIMIT = 5


class KeyValueStore:
    """JSON file holding string keys mapped to JSON values. Entries never expire."""

    def __init__(self, path: Path | str = ".cityweather/storage.json"):
        self.path = Path(path)
        self._enabled = True

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Test write permission
            test_file = self.path.parent / ".test"
            test_file.touch()
            test_file.unlink()
        except (PermissionError, OSError) as e:
            logger.warning(f"Storage disabled - cannot write to {self.path.parent}: {e}")
            self._enabled = False

    def _read_all(self) -> dict[str, Any]:
        if not self._enabled or not self.path.exists():
            return {}

        try:
            with open(self.path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to read storage {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring storage {self.path}: expected a JSON object")
            return {}
        return data

    def _write_all(self, data: dict[str, Any]) -> None:
        try:
            with open(self.path, "w") as f:
                json.dump(data, f, indent=2)
        except (TypeError, OSError) as e:
            logger.warning(f"Failed to write storage {self.path}: {e}")

    def get(self, key: str) -> Any | None:
        """Get a stored value or None."""
        return self._read_all().get(key)

    def set(self, key: str, value: Any) -> None:
        """Store a value."""
        if not self._enabled:
            return
        data = self._read_all()
        data[key] = value
        self._write_all(data)
        logger.debug(f"Stored {key}")

    def remove(self, key: str) -> None:
        """Remove a key if present."""
        if not self._enabled:
            return
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)


class RecentSearches:
    """Most-recent-first list of searched cities, persisted in a KeyValueStore."""

    def __init__(
        self,
        store: KeyValueStore,
        limit: int = DEFAULT_RECENT_LIMIT,
        key: str = RECENT_SEARCHES_KEY,
    ):
        self.store = store
        self.limit = limit
        self.key = key

    def items(self) -> list[str]:
        """Return stored cities, most recent first."""
        value = self.store.get(self.key)
        if not isinstance(value, list):
            return []
        return [city for city in value if isinstance(city, str)][: self.limit]

    def add(self, city: str) -> list[str]:
        """Move (or insert) a city to the head of the list and persist it."""
        formatted = format_city_name(city)
        searches = [s for s in self.items() if s.lower() != formatted.lower()]
        searches.insert(0, formatted)
        searches = searches[: self.limit]
        self.store.set(self.key, searches)
        return searches

    def clear(self) -> None:
        self.store.remove(self.key)
