"""Local filesystem settings store.

Keeps every key in a single JSON document under a data root with optional
namespace prefix::

    {data_root}/{prefix}/settings.json

When prefix is None, the path collapses to::

    {data_root}/settings.json

Reads are served from a cached copy of the document that is dropped whenever
the file on disk changes (inode, mtime or size).  Every ``set`` / ``delete``
re-reads the file before rewriting it, so several stores over the same file
(one per workspace context) do not lose each other's keys.

Writes are atomic: data is written to a temporary file in the same directory,
then renamed to the target path.  This prevents corrupt reads if the process
crashes mid-write.
"""

from __future__ import annotations

import contextlib
import copy
import json
import os
import tempfile
from pathlib import Path
from typing import Any

from loguru import logger

from viewdeck.workspace.store.base import StoreCorruptedError, StoreError


class LocalSettingsStore:
    """JSON-file implementation of the KeyValueStore protocol."""

    def __init__(self, data_root: str | Path, prefix: str | None = None, filename: str = "settings.json") -> None:
        base = Path(data_root)
        if prefix:
            base = base / prefix
        self._path = base / filename
        self._data: dict[str, Any] | None = None
        self._signature: tuple[int, int, int] | None = None

    @property
    def path(self) -> Path:
        return self._path

    # -- Read ------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        data = self._load()
        if key not in data:
            return default
        return copy.deepcopy(data[key])

    def has(self, key: str) -> bool:
        return key in self._load()

    # -- Write -----------------------------------------------------------------

    def set(self, key: str, value: Any) -> None:
        data = dict(self._load(fresh=True))
        data[key] = copy.deepcopy(value)
        self._flush(data)

    def delete(self, key: str) -> None:
        data = self._load(fresh=True)
        if key not in data:
            return
        data = {k: v for k, v in data.items() if k != key}
        self._flush(data)

    # -- Internals -------------------------------------------------------------

    def _load(self, fresh: bool = False) -> dict[str, Any]:
        signature = _file_signature(self._path)
        if fresh or self._data is None or signature != self._signature:
            self._data = _read_document(self._path)
            self._signature = signature
        return self._data

    def _flush(self, data: dict[str, Any]) -> None:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
        try:
            _atomic_write(self._path, payload)
        except OSError as exc:
            msg = f"Failed to write settings file {self._path}: {exc}"
            raise StoreError(msg) from exc
        # Only replace the cache once the file is durable.
        self._data = data
        self._signature = _file_signature(self._path)


# -- Sync helpers --------------------------------------------------------------


def _file_signature(path: Path) -> tuple[int, int, int] | None:
    try:
        stat = path.stat()
    except FileNotFoundError:
        return None
    except OSError as exc:
        msg = f"Failed to stat settings file {path}: {exc}"
        raise StoreError(msg) from exc
    return stat.st_ino, stat.st_mtime_ns, stat.st_size


def _read_document(path: Path) -> dict[str, Any]:
    """Read the settings document.  A missing file is an empty document."""
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("Settings file {} not found, starting empty", path)
        return {}
    except OSError as exc:
        msg = f"Failed to read settings file {path}: {exc}"
        raise StoreError(msg) from exc

    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        msg = f"Settings file {path} is not valid JSON: {exc}"
        raise StoreCorruptedError(msg) from None
    if not isinstance(data, dict):
        msg = f"Settings file {path} must contain a JSON object, got {type(data).__name__}"
        raise StoreCorruptedError(msg)
    return data


def _atomic_write(path: Path, data: str) -> None:
    """Write data atomically: temp file + rename.

    Ensures readers never see a partially-written file.  The temp file is
    created in the same directory so ``os.replace`` is atomic on POSIX.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(data)
        os.replace(tmp_path, path)
    except BaseException:
        # Clean up temp file on any failure.
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise
