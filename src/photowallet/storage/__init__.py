"""Key-value storage backends the wallet record is persisted to."""

from photowallet.storage.base import KeyValueStorage
from photowallet.storage.file import FileStorage
from photowallet.storage.memory import MemoryStorage

__all__ = ["FileStorage", "KeyValueStorage", "MemoryStorage"]
