"""photowallet - four-pocket photo wallet state with schema migration and local persistence."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("photowallet")
except PackageNotFoundError:
    __version__ = "0+local"
from photowallet.config import WalletConfig
from photowallet.exceptions import (
    PhotoWalletError,
    SlotIndexError,
    StorageQuotaExceededError,
    StorageUnavailableError,
    WalletStorageError,
)
from photowallet.migration import StoredSchema, detect_schema, normalize_wallet
from photowallet.models import WalletSlot, WalletState, empty_state
from photowallet.persistence import WalletPersistence
from photowallet.state.events import PersistenceEvent, PersistenceStatus, StorageOperation
from photowallet.state.store import WalletStore
from photowallet.storage import FileStorage, KeyValueStorage, MemoryStorage
from photowallet.wallet import open_wallet

__all__ = [
    "__version__",
    "FileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "PersistenceEvent",
    "PersistenceStatus",
    "PhotoWalletError",
    "SlotIndexError",
    "StorageOperation",
    "StorageQuotaExceededError",
    "StorageUnavailableError",
    "StoredSchema",
    "WalletConfig",
    "WalletPersistence",
    "WalletSlot",
    "WalletState",
    "WalletStorageError",
    "WalletStore",
    "detect_schema",
    "empty_state",
    "normalize_wallet",
    "open_wallet",
]
