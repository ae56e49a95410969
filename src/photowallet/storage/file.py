"""JSON-file key-value storage."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from photowallet.exceptions import StorageUnavailableError, WalletStorageError

_logger = logging.getLogger(__name__)


class FileStorage:
    """Persist string items as one JSON object in a file.

    The file maps keys to string values, so several keys (or several
    wallets) can share it. Writes go to a temporary file in the same
    directory and are moved into place with :func:`os.replace`, so a crash
    mid-write never leaves a half-written file behind. A damaged file still fails
    reads, but the next write replaces it instead of failing forever.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self, key: str) -> dict[str, str]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise StorageUnavailableError(f"cannot read {self._path}: {exc}", key=key) from exc

        if not text.strip():
            return {}
        try:
            data: Any = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StorageUnavailableError(f"{self._path} is not a JSON object file", key=key) from exc
        if not isinstance(data, dict):
            raise StorageUnavailableError(f"{self._path} is not a JSON object file", key=key)
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, items: dict[str, str], key: str) -> None:
        directory = self._path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=f".{self._path.name}_", suffix=".tmp", dir=directory)
        except OSError as exc:
            raise StorageUnavailableError(f"cannot write {self._path}: {exc}", key=key) from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f, ensure_ascii=False)
            os.replace(tmp_path, self._path)
        except OSError as exc:
            raise WalletStorageError(f"cannot write {self._path}: {exc}", key=key) from exc
        finally:
            try:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
            except OSError:
                _logger.warning("Failed to clean up temporary file %s", tmp_path, exc_info=True)

    def get_item(self, key: str) -> str | None:
        return self._read_all(key).get(key)

    def _read_for_write(self, key: str) -> tuple[dict[str, str], bool]:
        """Read the container before a write; a damaged one is replaced.

        Returns the items and whether the file had to be discarded.
        """
        try:
            return self._read_all(key), False
        except StorageUnavailableError:
            _logger.warning("Discarding unreadable storage file %s and rewriting it", self._path, exc_info=True)
            return {}, True

    def set_item(self, key: str, value: str) -> None:
        items, _ = self._read_for_write(key)
        items[key] = value
        self._write_all(items, key)

    def remove_item(self, key: str) -> None:
        items, discarded = self._read_for_write(key)
        if key not in items and not discarded:
            return
        items.pop(key, None)
        self._write_all(items, key)
