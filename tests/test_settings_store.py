"""Tests for key/value settings stores."""

import json
from pathlib import Path

from session_coordination.adapters.config import PushToTalkSettingsService
from session_coordination.adapters.storage import InMemorySettingsStore, JsonFileSettingsStore
from session_coordination.domain.models import PushToTalkSettings


def test_in_memory_store() -> None:
    store = InMemorySettingsStore({"a": "1"})
    store.set("b", "2")

    assert store.get("a") == "1"
    assert store.get("b") == "2"
    assert store.get("missing") is None


def test_json_store_persists_across_instances(tmp_path: Path) -> None:
    """Given values written by one store, when reopening the file, then they are read back."""
    path = tmp_path / "settings.json"
    JsonFileSettingsStore(path).set("pushToTalkKey", "v")

    assert JsonFileSettingsStore(path).get("pushToTalkKey") == "v"
    assert json.loads(path.read_text(encoding="utf-8")) == {"pushToTalkKey": "v"}


def test_json_store_creates_parent_directories(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "settings.json"

    JsonFileSettingsStore(path).set("k", "v")

    assert path.exists()


def test_json_store_missing_file_is_empty(tmp_path: Path) -> None:
    store = JsonFileSettingsStore(tmp_path / "absent.json")

    assert store.get("anything") is None


def test_json_store_corrupt_file_is_treated_as_empty(tmp_path: Path) -> None:
    """Given a corrupt file, when loading, then the store starts empty and stays writable."""
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    store = JsonFileSettingsStore(path)
    assert store.get("pushToTalkKey") is None

    store.set("pushToTalkKey", "b")
    assert JsonFileSettingsStore(path).get("pushToTalkKey") == "b"


def test_json_store_non_object_file_is_ignored(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text('["a", "b"]', encoding="utf-8")

    assert JsonFileSettingsStore(path).get("a") is None


def test_push_to_talk_settings_survive_restart(tmp_path: Path) -> None:
    """Given settings saved through the service, when a new service opens the file, then they match."""
    path = tmp_path / "settings.json"
    PushToTalkSettingsService(JsonFileSettingsStore(path)).set(
        PushToTalkSettings(enabled=True, key="Control")
    )

    restored = PushToTalkSettingsService(JsonFileSettingsStore(path)).get()

    assert restored == PushToTalkSettings(enabled=True, key="Control")
