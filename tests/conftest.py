"""Shared fixtures"""

import pytest

from hd_wallet.core.config import Config
from hd_wallet.core.exceptions import StorageError
from hd_wallet.core.storage import MemoryKeyValueStore, WalletStore
from hd_wallet.operations.session import WalletSession

# Standard BIP39 test phrase - FOR TESTING ONLY
TEST_MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)

OTHER_MNEMONIC = (
    "legal winner thank year wave sausage "
    "worth useful legal winner thank yellow"
)

# Correct words, broken checksum
BAD_CHECKSUM_MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon abandon"
)


class FlakyKeyValueStore(MemoryKeyValueStore):
    """Memory store whose writes or removals can be made to fail on a given key"""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.fail_on = set()
        self.fail_on_remove = set()

    def set_item(self, key, value):
        if key in self.fail_on:
            raise StorageError(f"disk full writing {key}")
        super().set_item(key, value)

    def remove_item(self, key):
        if key in self.fail_on_remove:
            raise StorageError(f"permission denied removing {key}")
        super().remove_item(key)

    def keys(self):
        return sorted(self._data)


@pytest.fixture
def kv():
    return FlakyKeyValueStore()


@pytest.fixture
def store(kv):
    return WalletStore(kv)


@pytest.fixture
def config(tmp_path):
    return Config(store_dir=tmp_path)


@pytest.fixture
def session(store, config):
    return WalletSession(store, config=config)


@pytest.fixture
def eth_session(session):
    """Ethereum session holding wallets at indices 0, 1, 2"""
    assert session.select_chain("60").ok
    assert session.generate_initial(TEST_MNEMONIC).ok
    assert session.add_wallet().ok
    assert session.add_wallet().ok
    return session
