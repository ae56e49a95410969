"""Helpers for safe debug logging.

Photo references are usually ``data:`` URLs holding an entire encoded
image, often several megabytes. This module turns them into short
summaries before they reach a log line or a terminal.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_DATA_URL_PREFIX = "data:"


def describe_ref(ref: str | None, *, max_string: int = 48) -> str:
    """Return a short, log-safe description of a photo reference."""
    if ref is None:
        return "<empty>"
    if ref.startswith(_DATA_URL_PREFIX):
        header, _, payload = ref.partition(",")
        return f"<{header} {len(payload)} chars>"
    if len(ref) > max_string:
        return f"{ref[:max_string]}…<truncated>"
    return ref


def redact_for_log(value: Any, *, max_string: int = 48, _depth: int = 0) -> Any:
    """Return a copy of *value* with every string summarized by :func:`describe_ref`."""
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        return describe_ref(value, max_string=max_string)

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, bytes):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        return {
            str(k): redact_for_log(v, max_string=max_string, _depth=_depth + 1) for k, v in value.items()
        }

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [redact_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]

    # Fallback: represent unknown objects without dumping internals.
    return repr(value)
