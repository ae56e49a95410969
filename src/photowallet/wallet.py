"""Wire a storage backend, persistence adapter and store together."""

from __future__ import annotations

from photowallet.config import WalletConfig
from photowallet.persistence import WalletPersistence
from photowallet.state.store import WalletStore
from photowallet.storage.base import KeyValueStorage
from photowallet.storage.file import FileStorage
from photowallet.storage.memory import MemoryStorage


def build_storage(config: WalletConfig) -> KeyValueStorage:
    if config.storage_path:
        return FileStorage(config.storage_path)
    return MemoryStorage(quota_chars=config.quota_chars)


def open_wallet(config: WalletConfig | None = None, *, storage: KeyValueStorage | None = None) -> WalletStore:
    """Open a ready-to-use wallet store.

    Parameters
    ----------
    config : WalletConfig, optional
        Defaults to :meth:`WalletConfig.from_env`.
    storage : KeyValueStorage, optional
        Explicit backend; overrides the one the config describes.
    """
    if config is None:
        config = WalletConfig.from_env()
    if storage is None:
        storage = build_storage(config)
    return WalletStore(WalletPersistence(storage, key=config.storage_key))
