"""Tests for key-value storage and recent searches."""

import json
from pathlib import Path

import pytest

from cityweather.services.storage import RECENT_SEARCHES_KEY, KeyValueStore, RecentSearches


class TestKeyValueStoreInit:
    """Tests for KeyValueStore initialization."""

    def test_creates_parent_directory(self, temp_dir):
        """Test that the storage directory is created."""
        path = temp_dir / "nested" / "storage.json"
        store = KeyValueStore(path)
        assert path.parent.exists()
        assert store._enabled is True

    def test_disabled_on_permission_error(self, temp_dir, monkeypatch):
        """Test storage is disabled when directory is not writable."""

        def mock_touch(*args, **kwargs):
            raise PermissionError("Permission denied")

        monkeypatch.setattr(Path, "touch", mock_touch)
        store = KeyValueStore(temp_dir / "storage.json")
        assert store._enabled is False


class TestKeyValueStoreOperations:
    """Tests for get/set/remove."""

    @pytest.fixture
    def store(self, temp_dir):
        return KeyValueStore(temp_dir / "storage.json")

    def test_set_and_get(self, store):
        store.set("key", ["Paris", "London"])
        assert store.get("key") == ["Paris", "London"]

    def test_get_nonexistent_key(self, store):
        assert store.get("missing") is None

    def test_survives_reopen(self, store, temp_dir):
        """Test that values persist across store instances."""
        store.set("key", {"data": 1})
        reopened = KeyValueStore(temp_dir / "storage.json")
        assert reopened.get("key") == {"data": 1}

    def test_keys_are_independent(self, store):
        store.set("a", 1)
        store.set("b", 2)
        assert store.get("a") == 1
        assert store.get("b") == 2

    def test_remove(self, store):
        store.set("a", 1)
        store.set("b", 2)
        store.remove("a")
        assert store.get("a") is None
        assert store.get("b") == 2

    def test_remove_nonexistent_key(self, store):
        store.remove("missing")  # Should not raise

    def test_stored_as_json_object(self, store):
        store.set(RECENT_SEARCHES_KEY, ["Paris"])
        with open(store.path) as f:
            assert json.load(f) == {RECENT_SEARCHES_KEY: ["Paris"]}


class TestKeyValueStoreCorruption:
    """Tests for handling corrupted storage files."""

    @pytest.fixture
    def store(self, temp_dir):
        return KeyValueStore(temp_dir / "storage.json")

    def test_corrupted_file_reads_empty(self, store):
        store.path.write_text("not valid json {{{")
        assert store.get("key") is None

    def test_non_object_file_reads_empty(self, store):
        store.path.write_text("[1, 2, 3]")
        assert store.get("key") is None

    def test_set_recovers_corrupted_file(self, store):
        store.path.write_text("corrupted")
        store.set("key", "value")
        assert store.get("key") == "value"


class TestDisabledStore:
    """Tests for disabled storage behavior."""

    def test_set_does_nothing(self, temp_dir):
        store = KeyValueStore(temp_dir / "storage.json")
        store._enabled = False
        store.set("key", "value")
        store._enabled = True
        assert store.get("key") is None


class TestRecentSearches:
    """Tests for the recent searches list."""

    @pytest.fixture
    def recent(self, temp_dir):
        return RecentSearches(KeyValueStore(temp_dir / "storage.json"), limit=5)

    def test_empty_initially(self, recent):
        assert recent.items() == []

    def test_add_normalizes_name(self, recent):
        """Test that each word is capitalized and the rest lowercased."""
        assert recent.add("nEW yORK") == ["New York"]

    def test_most_recent_first(self, recent):
        recent.add("Paris")
        recent.add("London")
        assert recent.items() == ["London", "Paris"]

    def test_case_insensitive_duplicate_moves_to_head(self, recent):
        """Test that re-adding a city in another case keeps one entry at the head."""
        recent.add("paris")
        recent.add("London")
        recent.add("PARIS")
        assert recent.items() == ["Paris", "London"]

    def test_caps_at_limit(self, recent):
        """Test that a sixth distinct city drops the oldest."""
        for city in ["Paris", "London", "Berlin", "Madrid", "Rome", "Vienna"]:
            recent.add(city)
        assert recent.items() == ["Vienna", "Rome", "Madrid", "Berlin", "London"]

    def test_persisted_under_key(self, recent):
        recent.add("Oslo")
        assert recent.store.get(RECENT_SEARCHES_KEY) == ["Oslo"]

    def test_ignores_invalid_payload(self, recent):
        """Test that a non-list payload is treated as empty."""
        recent.store.set(RECENT_SEARCHES_KEY, {"not": "a list"})
        assert recent.items() == []
        assert recent.add("Paris") == ["Paris"]

    def test_ignores_non_string_entries(self, recent):
        recent.store.set(RECENT_SEARCHES_KEY, ["Paris", 42, None, "Rome"])
        assert recent.items() == ["Paris", "Rome"]

    def test_clear(self, recent):
        recent.add("Paris")
        recent.clear()
        assert recent.items() == []

    def test_custom_limit(self, temp_dir):
        recent = RecentSearches(KeyValueStore(temp_dir / "storage.json"), limit=2)
        for city in ["Paris", "London", "Berlin"]:
            recent.add(city)
        assert recent.items() == ["Berlin", "London"]
