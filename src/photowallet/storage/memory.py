"""In-memory key-value storage."""

from __future__ import annotations

from photowallet.exceptions import StorageQuotaExceededError, StorageUnavailableError


class MemoryStorage:
    """Dict-backed storage with an optional size quota.

    Parameters
    ----------
    quota_chars : int or None
        Maximum total length of all keys and values. ``None`` disables the
        limit. Writes that would exceed it raise
        :class:`StorageQuotaExceededError` and leave the store unchanged.
    disabled : bool
        When set, every operation raises :class:`StorageUnavailableError`,
        like a browser with site storage turned off.
    """

    def __init__(self, *, quota_chars: int | None = None, disabled: bool = False) -> None:
        self._items: dict[str, str] = {}
        self.quota_chars = quota_chars
        self.disabled = disabled

    def _check_enabled(self, key: str) -> None:
        if self.disabled:
            raise StorageUnavailableError("storage is disabled", key=key)

    def _used_chars(self, *, excluding: str | None = None) -> int:
        return sum(len(k) + len(v) for k, v in self._items.items() if k != excluding)

    def get_item(self, key: str) -> str | None:
        self._check_enabled(key)
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._check_enabled(key)
        if self.quota_chars is not None:
            needed = self._used_chars(excluding=key) + len(key) + len(value)
            if needed > self.quota_chars:
                raise StorageQuotaExceededError(
                    f"writing {len(value)} chars would exceed the {self.quota_chars} char quota",
                    key=key,
                )
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._check_enabled(key)
        self._items.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)
