"""Data models for wallet state."""

from photowallet.models._base import PhotoRef, WalletBaseModel, blank_to_none
from photowallet.models.slot import WalletSlot, WalletState, empty_state

__all__ = [
    "PhotoRef",
    "WalletBaseModel",
    "WalletSlot",
    "WalletState",
    "blank_to_none",
    "empty_state",
]
