"""In-memory wallet store.

This is the only component allowed to change the wallet. It loads the
persisted record once on construction, so a store that exists is always
ready, and writes the whole wallet back after every mutation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from photowallet._constants import SLOT_COUNT, SUB_SLOT_COUNT
from photowallet._redact import describe_ref
from photowallet.exceptions import SlotIndexError
from photowallet.migration.normalize import StoredSchema, detect_schema, normalize_wallet
from photowallet.models.slot import WalletSlot, WalletState, empty_state
from photowallet.persistence import WalletPersistence

_logger = logging.getLogger(__name__)

StateListener = Callable[[WalletState], None]


def _check_index(index: int, limit: int, what: str) -> None:
    # bool is an int subclass; True must not address slot 1.
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < limit:
        raise SlotIndexError(f"{what} must be an int in [0, {limit}), got {index!r}", index=index, limit=limit)


class WalletStore:
    """Canonical wallet state plus its three mutations.

    Parameters
    ----------
    persistence : WalletPersistence
        Adapter the state is loaded from and saved to. Injected so tests
        (and multiple wallets) can use their own storage and key.
    """

    def __init__(self, persistence: WalletPersistence) -> None:
        self._persistence = persistence
        self._listeners: list[StateListener] = []
        raw = persistence.load()
        self._loaded_schema = detect_schema(raw)
        self._state = normalize_wallet(raw)
        _logger.debug("Wallet store ready with %d photos", self._state.photo_count)

    @property
    def persistence(self) -> WalletPersistence:
        return self._persistence

    @property
    def loaded_schema(self) -> StoredSchema:
        """Layout of the record found in storage when the store was opened."""
        return self._loaded_schema

    def snapshot(self) -> WalletState:
        """Return the current state. Snapshots are immutable."""
        return self._state

    def get_slot(self, index: int) -> WalletSlot:
        _check_index(index, SLOT_COUNT, "slot index")
        return self._state.slots[index]

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call *listener* with every new snapshot; returns an unsubscriber."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                _logger.debug("State listener failed", exc_info=True)

    def _commit(self, state: WalletState) -> None:
        self._state = state
        self._persistence.save(state)
        self._notify()

    def set_main(self, index: int, ref: str | None) -> None:
        """Replace the main photo of slot *index*; sub-photos are kept."""
        _check_index(index, SLOT_COUNT, "slot index")
        _logger.debug("Setting main photo of slot %d to %s", index, describe_ref(ref))
        slot = self._state.slots[index].with_main(ref)
        self._commit(self._state.with_slot(index, slot))

    def set_sub(self, main_index: int, sub_index: int, ref: str | None) -> None:
        """Replace one sub-photo; everything else is kept."""
        _check_index(main_index, SLOT_COUNT, "slot index")
        _check_index(sub_index, SUB_SLOT_COUNT, "sub-slot index")
        _logger.debug("Setting sub photo %d of slot %d to %s", sub_index, main_index, describe_ref(ref))
        slot = self._state.slots[main_index].with_sub(sub_index, ref)
        self._commit(self._state.with_slot(main_index, slot))

    def clear_all(self) -> None:
        """Reset to the empty wallet and delete the stored record.

        The key is removed rather than overwritten with an empty wallet.
        """
        _logger.debug("Clearing wallet (%d photos)", self._state.photo_count)
        self._state = empty_state()
        self._persistence.remove()
        self._notify()
