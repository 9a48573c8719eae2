"""Shared snapshot store.

A small key-value surface that more than one process can read: the app writes
the latest forecast snapshot, the widget reads it on its own schedule. Each
namespace is a directory under ``base_dir`` and each key is one file in it.

Writes go to a temporary file in the same directory and are moved into place
with ``os.replace``, so a reader sees either the old value or the new one.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path  # noqa: TC003 (used at runtime)

from simple_weather.errors import StoreWriteError

DEFAULT_NAMESPACE = "group.simple-weather"

#: Key holding the latest JSON-serialized ForecastSnapshot.
SNAPSHOT_KEY = "WeatherData"


class SnapshotStore:
    """Byte values by key inside a named shared namespace."""

    def __init__(self, base_dir: Path, namespace: str = DEFAULT_NAMESPACE) -> None:
        self.base = base_dir
        self.namespace = namespace
        self.root = self._resolve(base_dir, namespace)

    def get(self, key: str) -> bytes | None:
        """Return the stored bytes, or None if ``key`` was never put."""
        full = self._resolve(self.root, key)
        try:
            return full.read_bytes()
        except FileNotFoundError:
            return None

    def put(self, key: str, data: bytes) -> Path:
        """Store ``data`` under ``key``, replacing any prior value.

        Returns:
            Absolute path of the written file.

        Raises:
            StoreWriteError: The value couldn't be written.
        """
        full = self._resolve(self.root, key)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.root, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(data)
                os.replace(tmp, full)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as exc:
            msg = f"Failed to write {self.namespace}/{key}: {exc}"
            raise StoreWriteError(msg) from exc
        return full

    @staticmethod
    def _resolve(parent: Path, name: str) -> Path:
        full = parent / name
        try:
            full.resolve().relative_to(parent.resolve())
        except ValueError:
            msg = f"Path escapes store directory: {name}"
            raise ValueError(msg) from None
        if full.resolve() == parent.resolve():
            msg = f"Invalid store name: {name!r}"
            raise ValueError(msg)
        return full
