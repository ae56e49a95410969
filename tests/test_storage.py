from __future__ import annotations

import json
from pathlib import Path

import pytest

from photowallet.exceptions import StorageQuotaExceededError, StorageUnavailableError, WalletStorageError
from photowallet.storage.file import FileStorage
from photowallet.storage.memory import MemoryStorage


class TestMemoryStorage:
    def test_set_get_remove(self) -> None:
        storage = MemoryStorage()
        storage.set_item("k", "v")
        assert storage.get_item("k") == "v"
        storage.remove_item("k")
        assert storage.get_item("k") is None
        assert len(storage) == 0

    def test_remove_missing_key_is_noop(self) -> None:
        MemoryStorage().remove_item("nothing")

    def test_quota_counts_keys_and_values(self) -> None:
        storage = MemoryStorage(quota_chars=10)
        storage.set_item("ab", "cdef")  # 6 chars

        with pytest.raises(StorageQuotaExceededError) as excinfo:
            storage.set_item("gh", "ijk")  # +5 -> 11

        assert excinfo.value.key == "gh"
        assert storage.get_item("gh") is None

    def test_quota_replacing_value_only_counts_once(self) -> None:
        storage = MemoryStorage(quota_chars=10)
        storage.set_item("ab", "cdefgh")
        storage.set_item("ab", "12345678")
        assert storage.get_item("ab") == "12345678"

    def test_disabled_storage_raises(self) -> None:
        storage = MemoryStorage(disabled=True)
        with pytest.raises(StorageUnavailableError):
            storage.get_item("k")
        with pytest.raises(StorageUnavailableError):
            storage.set_item("k", "v")
        with pytest.raises(WalletStorageError):
            storage.remove_item("k")


class TestFileStorage:
    def test_missing_file_reads_as_empty(self, tmp_path: Path) -> None:
        assert FileStorage(tmp_path / "wallet.json").get_item("walletPhotos") is None

    def test_set_item_creates_file_and_parent_dirs(self, tmp_path: Path) -> None:
        path = tmp_path / "profile" / "wallet.json"
        storage = FileStorage(path)

        storage.set_item("walletPhotos", '["a.png"]')

        assert json.loads(path.read_text(encoding="utf-8")) == {"walletPhotos": '["a.png"]'}
        assert FileStorage(path).get_item("walletPhotos") == '["a.png"]'

    def test_keys_share_one_file(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path / "wallet.json")
        storage.set_item("a", "1")
        storage.set_item("b", "2")
        storage.remove_item("a")

        assert storage.get_item("a") is None
        assert storage.get_item("b") == "2"

    def test_no_temporary_files_left_behind(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path / "wallet.json")
        storage.set_item("a", "1")
        storage.set_item("a", "2")

        assert [p.name for p in tmp_path.iterdir()] == ["wallet.json"]

    @pytest.mark.parametrize("content", ["{broken", "[1, 2]"])
    def test_corrupt_file_raises_on_read(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "wallet.json"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(StorageUnavailableError):
            FileStorage(path).get_item("walletPhotos")
        assert path.read_text(encoding="utf-8") == content

    @pytest.mark.parametrize("content", ["{broken", "[1, 2]"])
    def test_write_replaces_corrupt_file(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "wallet.json"
        path.write_text(content, encoding="utf-8")
        storage = FileStorage(path)

        storage.set_item("walletPhotos", "[]")

        assert json.loads(path.read_text(encoding="utf-8")) == {"walletPhotos": "[]"}
        assert storage.get_item("walletPhotos") == "[]"

    def test_remove_replaces_corrupt_file(self, tmp_path: Path) -> None:
        path = tmp_path / "wallet.json"
        path.write_text("{broken", encoding="utf-8")

        FileStorage(path).remove_item("walletPhotos")

        assert json.loads(path.read_text(encoding="utf-8")) == {}

    def test_blank_file_reads_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "wallet.json"
        path.write_text("  \n", encoding="utf-8")
        assert FileStorage(path).get_item("walletPhotos") is None
