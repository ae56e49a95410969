"""End-to-end tests for opening wallets from configuration."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from photowallet import WalletConfig, open_wallet
from photowallet.models.slot import WalletSlot, empty_state
from photowallet.state.events import PersistenceStatus
from photowallet.storage.file import FileStorage
from photowallet.storage.memory import MemoryStorage
from photowallet.wallet import build_storage


def test_config_defaults() -> None:
    config = WalletConfig()
    assert config.storage_key == "walletPhotos"
    assert config.storage_path is None
    assert config.quota_chars is None


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PHOTOWALLET_STORAGE_KEY", "otherWallet")
    monkeypatch.setenv("PHOTOWALLET_STORAGE_PATH", "/tmp/wallet.json")
    monkeypatch.setenv("PHOTOWALLET_QUOTA_CHARS", "5000")

    config = WalletConfig.from_env()

    assert config.storage_key == "otherWallet"
    assert config.storage_path == "/tmp/wallet.json"
    assert config.quota_chars == 5000


def test_config_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PHOTOWALLET_STORAGE_KEY", "fromEnv")
    monkeypatch.setenv("PHOTOWALLET_QUOTA_CHARS", "5000")

    config = WalletConfig.from_env(storage_key="explicit", quota_chars=None)

    assert config.storage_key == "explicit"
    assert config.quota_chars is None


def test_build_storage_picks_backend(tmp_path: Path) -> None:
    assert isinstance(build_storage(WalletConfig()), MemoryStorage)
    assert isinstance(build_storage(WalletConfig(storage_path=str(tmp_path / "w.json"))), FileStorage)


def test_wallet_survives_reopen_from_file(tmp_path: Path) -> None:
    config = WalletConfig(storage_path=str(tmp_path / "wallet.json"))

    store = open_wallet(config)
    store.set_main(0, "a.png")
    store.set_sub(0, 2, "a2.png")

    reopened = open_wallet(config)
    assert reopened.get_slot(0) == WalletSlot(main="a.png", sub=(None, None, "a2.png"))


def test_legacy_file_record_is_migrated(tmp_path: Path) -> None:
    path = tmp_path / "wallet.json"
    path.write_text(json.dumps({"walletPhotos": json.dumps(["a.png", None, "c.png"])}), encoding="utf-8")

    store = open_wallet(WalletConfig(storage_path=str(path)))

    assert [slot.main for slot in store.snapshot().slots] == ["a.png", None, "c.png", None]
    assert all(slot.sub == (None, None, None) for slot in store.snapshot().slots)


def test_clear_all_removes_key_from_file(tmp_path: Path) -> None:
    path = tmp_path / "wallet.json"
    config = WalletConfig(storage_path=str(path))
    store = open_wallet(config)
    store.set_main(1, "b.png")

    store.clear_all()

    assert json.loads(path.read_text(encoding="utf-8")) == {}
    assert open_wallet(config).snapshot() == empty_state()


def test_open_wallet_uses_explicit_storage() -> None:
    storage = MemoryStorage(quota_chars=50)
    store = open_wallet(WalletConfig(), storage=storage)

    store.set_main(0, "x" * 100)

    assert store.persistence.status == PersistenceStatus.SAVE_FAILED


def test_open_wallet_defaults_to_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "env-wallet.json"
    monkeypatch.setenv("PHOTOWALLET_STORAGE_PATH", str(path))
    monkeypatch.delenv("PHOTOWALLET_STORAGE_KEY", raising=False)

    open_wallet().set_main(3, "d.png")

    assert "walletPhotos" in json.loads(path.read_text(encoding="utf-8"))


def test_config_ignores_blank_quota_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PHOTOWALLET_QUOTA_CHARS", "")

    assert WalletConfig.from_env().quota_chars is None


def test_corrupt_file_recovers_on_next_change(tmp_path: Path) -> None:
    path = tmp_path / "wallet.json"
    path.write_text("{broken", encoding="utf-8")
    config = WalletConfig(storage_path=str(path))

    store = open_wallet(config)
    assert store.persistence.status == PersistenceStatus.LOAD_FAILED

    store.set_main(0, "a.png")
    assert not store.persistence.is_degraded
    assert open_wallet(config).get_slot(0).main == "a.png"

    store.clear_all()
    assert not store.persistence.is_degraded
    assert json.loads(path.read_text(encoding="utf-8")) == {}


def test_clear_all_heals_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "wallet.json"
    path.write_text("{broken", encoding="utf-8")

    store = open_wallet(WalletConfig(storage_path=str(path)))
    store.clear_all()

    assert not store.persistence.is_degraded
    assert json.loads(path.read_text(encoding="utf-8")) == {}
