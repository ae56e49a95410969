"""Wallet slot and wallet state models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from photowallet.models._base import PhotoRef, WalletBaseModel


def _empty_sub() -> tuple[None, None, None]:
    return (None, None, None)


class WalletSlot(WalletBaseModel):
    """One physical wallet pocket.

    Parameters
    ----------
    main : str or None
        Primary photo shown in the grid.
    sub : tuple of 3 (str or None)
        Sub-photos shown in the detail view. Always exactly three
        positions; an empty position is ``None``.
    """

    main: PhotoRef = None
    sub: tuple[PhotoRef, PhotoRef, PhotoRef] = Field(default_factory=_empty_sub)

    @property
    def is_empty(self) -> bool:
        """Whether neither the main photo nor any sub-photo is set."""
        return self.main is None and all(ref is None for ref in self.sub)

    def with_main(self, ref: str | None) -> WalletSlot:
        return WalletSlot(main=ref, sub=self.sub)

    def with_sub(self, sub_index: int, ref: str | None) -> WalletSlot:
        sub = list(self.sub)
        sub[sub_index] = ref
        return WalletSlot(main=self.main, sub=tuple(sub))


def _empty_slots() -> tuple[WalletSlot, WalletSlot, WalletSlot, WalletSlot]:
    return (WalletSlot(), WalletSlot(), WalletSlot(), WalletSlot())


class WalletState(WalletBaseModel):
    """The whole wallet: exactly four slots, index = physical position."""

    slots: tuple[WalletSlot, WalletSlot, WalletSlot, WalletSlot] = Field(default_factory=_empty_slots)

    @property
    def photo_count(self) -> int:
        """Number of populated photo positions across all slots."""
        count = 0
        for slot in self.slots:
            if slot.main is not None:
                count += 1
            count += sum(1 for ref in slot.sub if ref is not None)
        return count

    def with_slot(self, index: int, slot: WalletSlot) -> WalletState:
        slots = list(self.slots)
        slots[index] = slot
        return WalletState(slots=tuple(slots))

    def to_storage(self) -> list[dict[str, Any]]:
        """Dump the state in the current storage schema.

        ``[{"main": str | None, "sub": [str | None, x3]}, ... x4]``
        """
        return [slot.model_dump(mode="json") for slot in self.slots]


def empty_state() -> WalletState:
    """Build the canonical all-empty wallet."""
    return WalletState()
