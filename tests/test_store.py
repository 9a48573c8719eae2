"""Tests for the shared snapshot store."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from simple_weather.errors import StoreWriteError
from simple_weather.store import DEFAULT_NAMESPACE, SNAPSHOT_KEY, SnapshotStore


class TestSnapshotStoreInit:
    """Test namespace layout."""

    def test_default_namespace(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path)
        assert store.namespace == DEFAULT_NAMESPACE
        assert store.root == tmp_path / DEFAULT_NAMESPACE

    def test_custom_namespace(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path, "group.test")
        assert store.root == tmp_path / "group.test"

    def test_namespace_cannot_escape(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="escapes"):
            SnapshotStore(tmp_path, "../elsewhere")


class TestSnapshotStoreGetPut:
    """Test reading and writing values."""

    def test_get_missing(self, tmp_path: Path) -> None:
        assert SnapshotStore(tmp_path).get(SNAPSHOT_KEY) is None

    def test_put_then_get(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path)
        store.put("k", b'{"a": 1}')
        assert store.get("k") == b'{"a": 1}'

    def test_put_returns_path(self, tmp_path: Path) -> None:
        path = SnapshotStore(tmp_path).put("k", b"x")
        assert path == tmp_path / DEFAULT_NAMESPACE / "k"
        assert path.read_bytes() == b"x"

    def test_overwrite(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path)
        store.put("k", b"old")
        store.put("k", b"new")
        assert store.get("k") == b"new"

    def test_keys_are_independent(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path)
        store.put("a", b"1")
        store.put("b", b"2")
        assert (store.get("a"), store.get("b")) == (b"1", b"2")

    def test_shared_between_instances(self, tmp_path: Path) -> None:
        SnapshotStore(tmp_path, "group.shared").put("k", b"value")
        assert SnapshotStore(tmp_path, "group.shared").get("k") == b"value"
        assert SnapshotStore(tmp_path, "group.other").get("k") is None

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path)
        store.put("k", b"value")
        assert os.listdir(store.root) == ["k"]

    @pytest.mark.parametrize("key", ["../outside", "/etc/passwd", ".", ""])
    def test_bad_key_rejected(self, tmp_path: Path, key: str) -> None:
        store = SnapshotStore(tmp_path)
        with pytest.raises(ValueError):
            store.put(key, b"x")


class TestSnapshotStoreWriteFailure:
    """Write failures surface as StoreWriteError and keep the old value."""

    def test_replace_fails(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path)
        store.put("k", b"old")
        with patch("simple_weather.store.os.replace", side_effect=OSError("read-only")):
            with pytest.raises(StoreWriteError, match="read-only"):
                store.put("k", b"new")
        assert store.get("k") == b"old"
        assert os.listdir(store.root) == ["k"]

    def test_unwritable_base(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        store = SnapshotStore(blocker)
        with pytest.raises(StoreWriteError):
            store.put("k", b"x")
