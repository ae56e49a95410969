"""Key-value storage contract."""

from __future__ import annotations

from typing import Protocol


class KeyValueStorage(Protocol):
    """Structural interface for string key-value stores.

    Modeled on the browser ``localStorage`` API: string keys, string
    values, missing keys read as ``None``. Implementations raise
    :class:`photowallet.exceptions.WalletStorageError` subclasses on
    failure; callers decide whether that is fatal.
    """

    def get_item(self, key: str) -> str | None:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...
