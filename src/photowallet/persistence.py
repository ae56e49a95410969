"""Persistence adapter between the wallet store and a key-value storage.

This is the only place where storage failures are caught. Every failure is
logged, recorded in :attr:`WalletPersistence.status` and announced to
listeners; none is raised, so the in-memory store stays authoritative for
the rest of the session.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from photowallet._constants import STORAGE_KEY
from photowallet.exceptions import WalletStorageError
from photowallet.models.slot import WalletState
from photowallet.state.events import FAILURE_STATUS, PersistenceEvent, PersistenceStatus, StorageOperation
from photowallet.storage.base import KeyValueStorage

_logger = logging.getLogger(__name__)

PersistenceListener = Callable[[PersistenceEvent], None]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class WalletPersistence:
    """Load, save and remove the wallet record under one fixed key."""

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = STORAGE_KEY,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._storage = storage
        self._key = key
        self._clock = clock
        self._status = PersistenceStatus.OK
        self._last_error: str | None = None
        self._listeners: list[PersistenceListener] = []

    @property
    def key(self) -> str:
        return self._key

    @property
    def status(self) -> PersistenceStatus:
        return self._status

    @property
    def last_error(self) -> str | None:
        """Message of the most recent failure, cleared by the next success."""
        return self._last_error

    @property
    def is_degraded(self) -> bool:
        """Whether recent changes may not survive a reload."""
        return self._status != PersistenceStatus.OK

    def add_listener(self, listener: PersistenceListener) -> Callable[[], None]:
        """Register *listener* for status changes; returns a remover."""
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    def _set_status(self, operation: StorageOperation, status: PersistenceStatus, error: str | None) -> None:
        self._last_error = error
        if status == self._status:
            return
        self._status = status
        event = PersistenceEvent(
            operation=operation,
            status=status,
            key=self._key,
            error=error,
            occurred_at=self._clock(),
        )
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                _logger.debug("Persistence listener failed", exc_info=True)

    def _succeeded(self, operation: StorageOperation) -> None:
        self._set_status(operation, PersistenceStatus.OK, None)

    def _failed(self, operation: StorageOperation, exc: BaseException) -> None:
        self._set_status(operation, FAILURE_STATUS[operation], str(exc) or type(exc).__name__)

    def load(self) -> Any:
        """Read and decode the stored record.

        Returns the decoded JSON value, or ``None`` when nothing is stored
        or the record cannot be read or decoded.
        """
        try:
            raw = self._storage.get_item(self._key)
        except (WalletStorageError, OSError) as exc:
            _logger.warning("Failed to read wallet record %r", self._key, exc_info=True)
            self._failed(StorageOperation.LOAD, exc)
            return None

        if not raw:
            _logger.debug("No wallet record stored under %r", self._key)
            self._succeeded(StorageOperation.LOAD)
            return None

        try:
            value = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            _logger.warning("Failed to decode wallet record %r (%d chars)", self._key, len(raw), exc_info=True)
            self._failed(StorageOperation.LOAD, exc)
            return None

        _logger.debug("Loaded wallet record %r (%d chars)", self._key, len(raw))
        self._succeeded(StorageOperation.LOAD)
        return value

    def save(self, state: WalletState) -> bool:
        """Write *state* in the current schema. Returns ``False`` on failure."""
        payload = json.dumps(state.to_storage(), separators=(",", ":"))
        try:
            self._storage.set_item(self._key, payload)
        except (WalletStorageError, OSError) as exc:
            _logger.warning(
                "Failed to save wallet record %r (%d chars); changes will not survive a reload",
                self._key,
                len(payload),
                exc_info=True,
            )
            self._failed(StorageOperation.SAVE, exc)
            return False

        _logger.debug("Saved wallet record %r (%d chars)", self._key, len(payload))
        self._succeeded(StorageOperation.SAVE)
        return True

    def remove(self) -> bool:
        """Delete the stored record outright. Returns ``False`` on failure."""
        try:
            self._storage.remove_item(self._key)
        except (WalletStorageError, OSError) as exc:
            _logger.warning("Failed to remove wallet record %r", self._key, exc_info=True)
            self._failed(StorageOperation.REMOVE, exc)
            return False

        _logger.debug("Removed wallet record %r", self._key)
        self._succeeded(StorageOperation.REMOVE)
        return True
