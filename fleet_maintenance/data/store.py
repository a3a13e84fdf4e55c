"""
Synchronous string-keyed storage holding whole JSON blobs.

Two implementations share the same contract: a directory of ``<key>.json``
files for the running app and an in-memory dict for tests. Neither locks;
concurrent writers race on read-modify-write sequences.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from fleet_maintenance.errors import CorruptStoreError, StoreWriteError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def read(self, key: str) -> Optional[Any]:
        ...

    def write(self, key: str, value: Any) -> None:
        ...

    def exists(self, key: str) -> bool:
        ...

    def remove(self, key: str) -> None:
        ...


def _decode(key: str, text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        logger.error("Malformed JSON stored under %r: %s", key, exc)
        raise CorruptStoreError(key, str(exc)) from exc


def _encode(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


class MemoryStore:
    """Keeps the serialized text per key, like browser local storage."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def read(self, key: str) -> Optional[Any]:
        text = self._data.get(key)
        if text is None:
            return None
        return _decode(key, text)

    def write(self, key: str, value: Any) -> None:
        self._data[key] = _encode(value)

    def exists(self, key: str) -> bool:
        return key in self._data

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def raw(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def put_raw(self, key: str, text: str) -> None:
        self._data[key] = text


class JsonFileStore:
    def __init__(self, root_dir: Path | str) -> None:
        self.root_dir = Path(root_dir)

    def _path(self, key: str) -> Path:
        return self.root_dir / f"{key}.json"

    def read(self, key: str) -> Optional[Any]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            logger.error("Stored value for %r is not UTF-8: %s", key, exc)
            raise CorruptStoreError(key, str(exc)) from exc
        return _decode(key, text)

    def write(self, key: str, value: Any) -> None:
        path = self._path(key)
        text = _encode(value)
        tmp_name = None
        try:
            self.root_dir.mkdir(parents=True, exist_ok=True)
            # Write to a sibling temp file first so a blob is never half-written
            fd, tmp_name = tempfile.mkstemp(dir=self.root_dir, prefix=f".{key}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_name, path)
        except OSError as exc:
            logger.error("Failed writing %s: %s", path, exc)
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise StoreWriteError(key, exc) from exc
        logger.debug("Wrote %d bytes to %s", len(text), path)

    def exists(self, key: str) -> bool:
        return self._path(key).exists()

    def remove(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as exc:
            raise StoreWriteError(key, exc) from exc
