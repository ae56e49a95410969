#!/usr/bin/env python3
"""Inspect (and optionally migrate) a wallet record in a JSON-file storage.

Prints which stored layout was detected and the normalized wallet, with
photo references summarized instead of dumped.

Usage
-----
::

    python scripts/inspect_wallet.py wallet.json
    PHOTOWALLET_STORAGE_PATH=wallet.json python scripts/inspect_wallet.py

Options::

    --key KEY        Storage key (default: walletPhotos)
    --json           Output as machine-readable JSON
    --migrate        Write the record back in the current layout
    --clear          Remove the record
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from photowallet import (  # noqa: E402
    FileStorage,
    WalletConfig,
    WalletPersistence,
    WalletState,
    WalletStore,
)
from photowallet._redact import describe_ref, redact_for_log  # noqa: E402


def _format_state(state: WalletState) -> list[str]:
    out: list[str] = []
    for index, slot in enumerate(state.slots):
        out.append(f"  slot {index}: main={describe_ref(slot.main)}")
        for sub_index, ref in enumerate(slot.sub):
            out.append(f"    sub {sub_index}: {describe_ref(ref)}")
    return out


def main() -> int:
    parser = argparse.ArgumentParser(description="Inspect a photowallet record in a JSON-file storage.")
    parser.add_argument("path", nargs="?", help="Storage file (default: $PHOTOWALLET_STORAGE_PATH)")
    parser.add_argument("--key", help="Storage key (default: $PHOTOWALLET_STORAGE_KEY or walletPhotos)")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    action = parser.add_mutually_exclusive_group()
    action.add_argument("--migrate", action="store_true", help="Rewrite the record in the current layout")
    action.add_argument("--clear", action="store_true", help="Remove the record")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    overrides: dict[str, Any] = {}
    if args.path:
        overrides["storage_path"] = args.path
    if args.key:
        overrides["storage_key"] = args.key
    config = WalletConfig.from_env(**overrides)
    if not config.storage_path:
        parser.error("a storage file is required (argument or PHOTOWALLET_STORAGE_PATH)")

    persistence = WalletPersistence(FileStorage(config.storage_path), key=config.storage_key)
    store = WalletStore(persistence)
    schema = store.loaded_schema

    if args.migrate:
        persistence.save(store.snapshot())
    elif args.clear:
        store.clear_all()

    state = store.snapshot()
    if args.json_mode:
        result = {
            "key": config.storage_key,
            "schema": str(schema),
            "photos": state.photo_count,
            "status": str(persistence.status),
            "error": persistence.last_error,
            "slots": redact_for_log(state.to_storage()),
        }
        print(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        print(f"key: {config.storage_key}")
        print(f"stored layout: {schema}")
        print(f"photos: {state.photo_count}")
        print("\n".join(_format_state(state)))
        if persistence.is_degraded:
            print(f"storage problem: {persistence.last_error}", file=sys.stderr)

    return 1 if persistence.is_degraded else 0


if __name__ == "__main__":
    sys.exit(main())
