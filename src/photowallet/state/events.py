"""Persistence status events.

Storage failures never interrupt the wallet; they are reported through
these events so a UI can tell the user that changes may not survive a
reload.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class StorageOperation(StrEnum):
    LOAD = "load"
    SAVE = "save"
    REMOVE = "remove"


class PersistenceStatus(StrEnum):
    OK = "ok"
    LOAD_FAILED = "load_failed"
    SAVE_FAILED = "save_failed"
    REMOVE_FAILED = "remove_failed"


FAILURE_STATUS: dict[StorageOperation, PersistenceStatus] = {
    StorageOperation.LOAD: PersistenceStatus.LOAD_FAILED,
    StorageOperation.SAVE: PersistenceStatus.SAVE_FAILED,
    StorageOperation.REMOVE: PersistenceStatus.REMOVE_FAILED,
}


class PersistenceEvent(BaseModel):
    """A change of the persistence adapter's status."""

    model_config = ConfigDict(frozen=True)

    operation: StorageOperation
    status: PersistenceStatus
    key: str
    error: str | None = Field(default=None, description="Failure message, if the operation failed")
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def is_failure(self) -> bool:
        return self.status != PersistenceStatus.OK
