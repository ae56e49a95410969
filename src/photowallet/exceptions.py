"""Custom exception hierarchy for photowallet."""

from __future__ import annotations


class PhotoWalletError(Exception):
    """Base exception for all photowallet errors."""


class SlotIndexError(PhotoWalletError, IndexError):
    """A slot or sub-slot index is outside the wallet's fixed layout."""

    def __init__(self, message: str, *, index: object, limit: int) -> None:
        self.index = index
        self.limit = limit
        super().__init__(message)


class WalletStorageError(PhotoWalletError):
    """Key-value storage read/write failure."""

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)


class StorageQuotaExceededError(WalletStorageError):
    """Write rejected because the storage is full.

    The equivalent of a browser ``QuotaExceededError``; data URLs for a
    handful of phone photos can easily exceed a few megabytes.
    """


class StorageUnavailableError(WalletStorageError):
    """Storage is disabled or its backing medium cannot be accessed."""
