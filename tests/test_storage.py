"""Tests for the wallet snapshot store"""

import json
import os

import pytest

from hd_wallet.core.exceptions import StorageError
from hd_wallet.core.storage import (
    CHAIN_KEY,
    MNEMONICS_KEY,
    WALLETS_KEY,
    FileKeyValueStore,
    MemoryKeyValueStore,
    WalletStore,
)
from hd_wallet.core.types import KeyPair

from conftest import TEST_MNEMONIC

WORDS = TEST_MNEMONIC.split()
WALLETS = [
    KeyPair("pub0", "priv0", "m/44'/60'/0'/0'"),
    KeyPair("pub1", "priv1", "m/44'/60'/0'/1'"),
    KeyPair("pub2", "priv2", "m/44'/60'/0'/2'"),
]


class TestWalletStore:
    def test_round_trip(self, store):
        store.save(WALLETS, WORDS, "60")
        snapshot = store.load()
        assert snapshot.wallets == tuple(WALLETS)
        assert snapshot.mnemonic == tuple(WORDS)
        assert snapshot.chain == "60"

    def test_on_disk_format(self, kv, store):
        store.save(WALLETS[:1], WORDS, "501")
        assert json.loads(kv.get_item(WALLETS_KEY)) == [
            {"publicKey": "pub0", "privateKey": "priv0", "path": "m/44'/60'/0'/0'"}
        ]
        assert json.loads(kv.get_item(MNEMONICS_KEY)) == WORDS
        assert kv.get_item(CHAIN_KEY) == '"501"'

    def test_empty_store_is_absent(self, store):
        assert store.load() is None

    def test_partial_snapshot_is_absent(self, kv, store):
        store.save(WALLETS, WORDS)
        assert kv.get_item(CHAIN_KEY) is None
        assert store.load() is None

    @pytest.mark.parametrize("key,raw", [
        (WALLETS_KEY, "not json"),
        (WALLETS_KEY, '{"publicKey": "x"}'),
        (WALLETS_KEY, '[{"publicKey": "x", "privateKey": "y"}]'),
        (MNEMONICS_KEY, '"abandon"'),
        (CHAIN_KEY, "60"),
    ])
    def test_malformed_record_is_absent(self, kv, store, key, raw):
        store.save(WALLETS, WORDS, "60")
        kv.set_item(key, raw)
        assert store.load() is None

    def test_save_without_mnemonic_keeps_existing(self, kv, store):
        store.save(WALLETS, WORDS, "60")
        store.save(WALLETS[:2])
        snapshot = store.load()
        assert len(snapshot.wallets) == 2
        assert snapshot.mnemonic == tuple(WORDS)
        assert snapshot.chain == "60"

    def test_clear_keeps_chain(self, kv, store):
        store.save(WALLETS, WORDS, "60")
        store.clear()
        assert kv.keys() == [CHAIN_KEY]
        assert store.load() is None

    def test_failed_save_rolls_back(self, kv, store):
        store.save(WALLETS[:1], WORDS, "60")
        before = {key: kv.get_item(key) for key in kv.keys()}

        kv.fail_on.add(CHAIN_KEY)
        with pytest.raises(StorageError):
            store.save(WALLETS, WORDS, "501")

        assert {key: kv.get_item(key) for key in kv.keys()} == before

    def test_failed_first_save_leaves_nothing(self, kv, store):
        kv.fail_on.add(MNEMONICS_KEY)
        with pytest.raises(StorageError):
            store.save(WALLETS, WORDS, "60")
        assert kv.keys() == []


class TestFileKeyValueStore:
    def test_set_get_remove(self, tmp_path):
        kv = FileKeyValueStore(tmp_path / "store")
        assert kv.get_item("wallets") is None

        kv.set_item("wallets", "[]")
        assert kv.get_item("wallets") == "[]"
        assert (tmp_path / "store" / "wallets.json").read_text() == "[]"

        kv.remove_item("wallets")
        kv.remove_item("wallets")
        assert kv.get_item("wallets") is None

    def test_overwrite_leaves_no_temp_files(self, tmp_path):
        kv = FileKeyValueStore(tmp_path)
        kv.set_item("chain", '"60"')
        kv.set_item("chain", '"501"')
        assert kv.get_item("chain") == '"501"'
        assert sorted(p.name for p in tmp_path.iterdir()) == ["chain.json"]

    @pytest.mark.skipif(os.name != "posix", reason="Unix permissions")
    def test_files_are_owner_only(self, tmp_path):
        kv = FileKeyValueStore(tmp_path)
        kv.set_item("mnemonics", "[]")
        assert (tmp_path / "mnemonics.json").stat().st_mode & 0o777 == 0o600

    def test_wallet_store_on_disk(self, tmp_path):
        store = WalletStore(FileKeyValueStore(tmp_path))
        store.save(WALLETS, WORDS, "60")
        assert WalletStore(FileKeyValueStore(tmp_path)).load().wallets == tuple(WALLETS)

    def test_write_error_is_storage_error(self, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        kv = FileKeyValueStore(blocker)
        with pytest.raises(StorageError):
            kv.set_item("wallets", "[]")


def test_memory_store_initial_data():
    kv = MemoryKeyValueStore({"chain": '"60"'})
    assert kv.get_item("chain") == '"60"'


class TestCorruptRecords:
    def test_undecodable_file_is_absent(self, tmp_path):
        store = WalletStore(FileKeyValueStore(tmp_path))
        store.save(WALLETS, WORDS, "60")
        (tmp_path / "wallets.json").write_bytes(b"\xff\xfe[]")
        assert store.load() is None

    def test_deeply_nested_record_is_absent(self, kv, store):
        store.save(WALLETS, WORDS, "60")
        kv.set_item(WALLETS_KEY, "[" * 100000)
        assert store.load() is None

    def test_save_over_undecodable_file(self, tmp_path):
        store = WalletStore(FileKeyValueStore(tmp_path))
        store.save(WALLETS, WORDS, "60")
        (tmp_path / "wallets.json").write_bytes(b"\xff\xfe[]")
        store.save(WALLETS[:1])
        assert store.load().wallets == tuple(WALLETS[:1])


class TestClearRollback:
    def test_failed_clear_restores_removed_records(self, kv, store):
        store.save(WALLETS, WORDS, "60")
        before = {key: kv.get_item(key) for key in kv.keys()}

        kv.fail_on_remove.add(MNEMONICS_KEY)
        with pytest.raises(StorageError):
            store.clear()

        assert {key: kv.get_item(key) for key in kv.keys()} == before
        assert store.load().wallets == tuple(WALLETS)
