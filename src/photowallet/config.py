"""Configuration for photowallet."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from photowallet._constants import STORAGE_KEY


@dataclasses.dataclass(frozen=True)
class WalletConfig:
    """Wallet configuration.

    Parameters
    ----------
    storage_key : str
        Key the wallet record is stored under.
    storage_path : str or None
        JSON file used as the key-value storage. ``None`` keeps the wallet
        in memory only.
    quota_chars : int or None
        Size limit for the in-memory storage, in characters. Ignored for
        file storage.
    """

    storage_key: str = STORAGE_KEY
    storage_path: str | None = None
    quota_chars: int | None = None

    @classmethod
    def from_env(cls, **overrides: Any) -> WalletConfig:
        """Create configuration from ``PHOTOWALLET_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        key_env = env.get("PHOTOWALLET_STORAGE_KEY")
        if key_env:
            config_kwargs["storage_key"] = key_env

        path_env = env.get("PHOTOWALLET_STORAGE_PATH")
        if path_env:
            config_kwargs["storage_path"] = path_env

        quota_env = env.get("PHOTOWALLET_QUOTA_CHARS")
        if quota_env and "quota_chars" not in overrides:
            config_kwargs["quota_chars"] = int(quota_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
