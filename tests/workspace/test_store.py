"""Unit tests for LocalSettingsStore and MemoryStore.

No database or Docker required -- uses a temporary directory.
"""

from __future__ import annotations

import os

import pytest

from viewdeck.workspace.store import KeyValueStore, LocalSettingsStore, MemoryStore, StoreCorruptedError, StoreError


@pytest.fixture
def local_store(tmp_path) -> LocalSettingsStore:
    return LocalSettingsStore(tmp_path)


def test_stores_satisfy_protocol(local_store: LocalSettingsStore) -> None:
    assert isinstance(local_store, KeyValueStore)
    assert isinstance(MemoryStore(), KeyValueStore)


def test_missing_key_returns_default(local_store: LocalSettingsStore) -> None:
    assert local_store.get("active-devices") is None
    assert local_store.get("active-devices", []) == []
    assert local_store.has("active-devices") is False


def test_set_and_get(local_store: LocalSettingsStore) -> None:
    local_store.set("active-devices", ["iPhone X", "iPad"])
    local_store.set("user-preferences", {"disable_ssl_validation": True, "drawer_state": None})

    assert local_store.get("active-devices") == ["iPhone X", "iPad"]
    assert local_store.get("user-preferences") == {"disable_ssl_validation": True, "drawer_state": None}
    assert local_store.has("active-devices") is True


def test_values_survive_new_instance(tmp_path) -> None:
    """A second store over the same directory sees what the first wrote."""
    LocalSettingsStore(tmp_path).set("homepage", "https://example.com/")

    reopened = LocalSettingsStore(tmp_path)
    assert reopened.get("homepage") == "https://example.com/"


def test_delete(local_store: LocalSettingsStore, tmp_path) -> None:
    local_store.set("homepage", "https://example.com/")
    local_store.delete("homepage")
    assert local_store.has("homepage") is False
    assert LocalSettingsStore(tmp_path).has("homepage") is False

    # Delete non-existent is a no-op.
    local_store.delete("nonexistent")


def test_returned_values_are_copies(local_store: LocalSettingsStore) -> None:
    local_store.set("active-devices", ["iPad"])
    names = local_store.get("active-devices")
    names.append("mutated")
    assert local_store.get("active-devices") == ["iPad"]


def test_prefix_creates_namespaced_path(tmp_path) -> None:
    """Prefix inserts a namespace directory between data_root and the file."""
    store = LocalSettingsStore(tmp_path, prefix="alice")
    store.set("homepage", "https://alice.example/")

    assert (tmp_path / "alice" / "settings.json").exists()
    assert not (tmp_path / "settings.json").exists()
    assert store.path == tmp_path / "alice" / "settings.json"


def test_different_prefixes_isolated(tmp_path) -> None:
    store_a = LocalSettingsStore(tmp_path, prefix="alice")
    store_b = LocalSettingsStore(tmp_path, prefix="bob")

    store_a.set("homepage", "https://alice.example/")
    store_b.set("homepage", "https://bob.example/")

    assert LocalSettingsStore(tmp_path, prefix="alice").get("homepage") == "https://alice.example/"
    assert LocalSettingsStore(tmp_path, prefix="bob").get("homepage") == "https://bob.example/"


def test_empty_file_is_empty_document(tmp_path) -> None:
    (tmp_path / "settings.json").write_text("", encoding="utf-8")
    assert LocalSettingsStore(tmp_path).get("homepage") is None


def test_invalid_json_raises_corrupted(tmp_path) -> None:
    (tmp_path / "settings.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(StoreCorruptedError):
        LocalSettingsStore(tmp_path).get("homepage")


def test_non_object_document_raises_corrupted(tmp_path) -> None:
    (tmp_path / "settings.json").write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(StoreCorruptedError):
        LocalSettingsStore(tmp_path).get("homepage")


def test_failed_write_raises_and_keeps_previous_value(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A failed rename surfaces as StoreError; no temp file or partial data remains."""
    store = LocalSettingsStore(tmp_path)
    store.set("homepage", "https://before.example/")

    def _fail_replace(src, dst):
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr(os, "replace", _fail_replace)
    with pytest.raises(StoreError):
        store.set("homepage", "https://after.example/")
    monkeypatch.undo()

    assert store.get("homepage") == "https://before.example/"
    assert LocalSettingsStore(tmp_path).get("homepage") == "https://before.example/"
    assert list(tmp_path.glob("*.tmp")) == []


def test_memory_store_isolates_values() -> None:
    initial = {"active-devices": ["iPad"]}
    store = MemoryStore(initial)
    initial["active-devices"].append("leak")

    assert store.get("active-devices") == ["iPad"]
    store.delete("active-devices")
    assert store.has("active-devices") is False


def test_stores_sharing_a_file_keep_each_others_keys(tmp_path) -> None:
    """Two stores over one file (two workspace contexts) never drop the other's writes."""
    store_a = LocalSettingsStore(tmp_path)
    store_b = LocalSettingsStore(tmp_path)
    assert store_b.get("homepage") is None

    store_a.set("homepage", "https://a.example/")
    store_b.set("user-preferences", {"disable_ssl_validation": True, "drawer_state": None})

    reopened = LocalSettingsStore(tmp_path)
    assert reopened.get("homepage") == "https://a.example/"
    assert reopened.get("user-preferences") == {"disable_ssl_validation": True, "drawer_state": None}


def test_reads_pick_up_writes_from_another_store(tmp_path) -> None:
    reader = LocalSettingsStore(tmp_path)
    writer = LocalSettingsStore(tmp_path)
    writer.set("homepage", "https://before.example/")
    assert reader.get("homepage") == "https://before.example/"

    writer.set("homepage", "https://after.example/")
    assert reader.get("homepage") == "https://after.example/"

    writer.delete("homepage")
    assert reader.has("homepage") is False


def test_delete_keeps_keys_written_by_another_store(tmp_path) -> None:
    store_a = LocalSettingsStore(tmp_path)
    store_b = LocalSettingsStore(tmp_path)
    store_a.set("homepage", "https://a.example/")
    store_a.set("custom-devices", [])

    store_b.set("active-devices", ["iPad"])
    store_a.delete("custom-devices")

    assert LocalSettingsStore(tmp_path).get("active-devices") == ["iPad"]
