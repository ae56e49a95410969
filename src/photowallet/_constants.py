"""Internal constants shared across the library."""

#: Storage key the wallet record lives under (same key the web app used).
STORAGE_KEY = "walletPhotos"

#: Number of physical wallet pockets.
SLOT_COUNT = 4

#: Sub-photos attached to every main slot.
SUB_SLOT_COUNT = 3
