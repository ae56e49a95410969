"""Migration layer.

Converts previously persisted wallet records, in any historical layout or
none, into a valid :class:`photowallet.models.WalletState`.
"""

from photowallet.migration.normalize import StoredSchema, detect_schema, normalize_wallet, safe_ref

__all__ = ["StoredSchema", "detect_schema", "normalize_wallet", "safe_ref"]
