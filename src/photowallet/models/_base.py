"""Base model and shared field types for wallet models.

Every wallet model inherits from :class:`WalletBaseModel` which is
frozen, so a state snapshot handed to a renderer can never be changed
behind the store's back.

Photo references use the :data:`PhotoRef` annotated type, which folds the
empty string into ``None`` so that "no photo" has a single representation
in memory and on disk.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def blank_to_none(value: Any) -> Any:
    """Map ``""`` to ``None``; everything else is left for pydantic to validate."""
    if isinstance(value, str) and value == "":
        return None
    return value


PhotoRef = Annotated[str | None, BeforeValidator(blank_to_none)]
"""Opaque encoded-image string, or ``None`` for an empty position."""


class WalletBaseModel(BaseModel):
    """Base for wallet models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
    )
