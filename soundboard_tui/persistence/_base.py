"""Key-value storage adapters.

Stores above this layer only ever see strings: JSON encoding of lists and
settings happens in the stores, never in the adapter.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Protocol

from ..log import logger


class StorageWriteError(Exception):
    """The backing store rejected a write (disk full, read-only, disabled)."""


class KeyValueStorage(Protocol):
    """Minimal synchronous string store (``get`` / ``set``).

    ``set`` raises :class:`StorageWriteError` on failure.
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """In-process store, used for tests and ``--no-persist`` style sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileStorage:
    """All keys in one JSON object file, rewritten atomically on each write.

    On-disk format: ``{key: string_value}``.  An unreadable or corrupt file
    reads as empty; the next successful write replaces it.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    # -- core I/O -------------------------------------------------------------

    def _read_all(self) -> dict[str, str]:
        try:
            if self.path.exists():
                data = json.loads(self.path.read_text(encoding="utf-8"))
                if isinstance(data, dict):
                    return {k: v for k, v in data.items() if isinstance(v, str)}
                logger.warning("storage file %s is not a JSON object", self.path)
        except (OSError, json.JSONDecodeError):
            logger.warning("failed to read storage file %s", self.path, exc_info=True)
        return {}

    def _write_all(self, data: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                try:
                    f = os.fdopen(fd, "w", encoding="utf-8")
                except BaseException:
                    os.close(fd)
                    raise
                with f:
                    json.dump(data, f, indent=2, ensure_ascii=False, sort_keys=True)
                os.replace(tmp, self.path)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageWriteError(f"cannot write {self.path}: {exc}") from exc

    # -- KeyValueStorage ------------------------------------------------------

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def keys(self) -> list[str]:
        return list(self._read_all())
