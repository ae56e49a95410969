"""Load-time migration of persisted wallet records.

Centralizes defensive parsing of whatever a storage backend hands back.
Two historical layouts exist:

* **legacy**: a flat list of up to four photo references (``str`` or
  ``None``), one per pocket, from before sub-photos existed.
* **current**: a list of up to four ``{"main": ..., "sub": [...]}``
  objects.

The layout is sniffed from the *first element only*. An empty list counts
as legacy, which is harmless because both layouts map ``[]`` to the empty
wallet. A first element of ``None`` also counts as legacy; a current record
always starts with an object, so that case is unambiguous in practice.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from photowallet._constants import SLOT_COUNT, SUB_SLOT_COUNT
from photowallet.models.slot import WalletSlot, WalletState, empty_state

_logger = logging.getLogger(__name__)


class StoredSchema(StrEnum):
    ABSENT = "absent"
    LEGACY = "legacy"
    CURRENT = "current"
    UNRECOGNIZED = "unrecognized"


def safe_ref(value: Any) -> str | None:
    """Return *value* if it is a usable photo reference, else ``None``."""
    if isinstance(value, str) and value:
        return value
    return None


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def detect_schema(value: Any) -> StoredSchema:
    """Classify a decoded storage value by its first element."""
    if value is None:
        return StoredSchema.ABSENT
    if not _is_sequence(value):
        return StoredSchema.UNRECOGNIZED
    if len(value) == 0:
        return StoredSchema.LEGACY

    first = value[0]
    if first is None or isinstance(first, str):
        return StoredSchema.LEGACY
    # Anything a JSON decoder produces as an "object": mappings and arrays.
    if isinstance(first, Mapping) or _is_sequence(first):
        return StoredSchema.CURRENT
    return StoredSchema.UNRECOGNIZED


def _migrate_legacy(entries: list[Any] | tuple[Any, ...]) -> WalletState:
    state = empty_state()
    for index, entry in enumerate(entries[:SLOT_COUNT]):
        ref = safe_ref(entry)
        if ref is not None:
            state = state.with_slot(index, state.slots[index].with_main(ref))
    return state


def _coerce_sub(value: Any) -> tuple[str | None, ...]:
    if not _is_sequence(value):
        return (None,) * SUB_SLOT_COUNT
    padded = [safe_ref(item) for item in value[:SUB_SLOT_COUNT]]
    padded.extend([None] * (SUB_SLOT_COUNT - len(padded)))
    return tuple(padded)


def _coerce_slot(value: Any) -> WalletSlot:
    if not isinstance(value, Mapping):
        return WalletSlot()
    return WalletSlot(main=safe_ref(value.get("main")), sub=_coerce_sub(value.get("sub")))


def _migrate_current(entries: list[Any] | tuple[Any, ...]) -> WalletState:
    slots = [_coerce_slot(entry) for entry in entries[:SLOT_COUNT]]
    while len(slots) < SLOT_COUNT:
        slots.append(WalletSlot())
    return WalletState(slots=tuple(slots))


def normalize_wallet(value: Any) -> WalletState:
    """Turn any decoded storage value into a valid four-slot wallet.

    Never raises: unrecognized input degrades to :func:`empty_state`.
    """

    schema = detect_schema(value)
    if schema == StoredSchema.LEGACY:
        state = _migrate_legacy(value)
    elif schema == StoredSchema.CURRENT:
        state = _migrate_current(value)
    else:
        state = empty_state()

    if schema == StoredSchema.UNRECOGNIZED:
        _logger.debug("Discarding unrecognized wallet record of type %s", type(value).__name__)
    else:
        _logger.debug("Normalized %s wallet record (%d photos)", schema, state.photo_count)
    return state
