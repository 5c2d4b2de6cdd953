"""Core module - configuration, exceptions, types, storage and logging"""

from .config import Config
from .exceptions import (
    ErrorKind,
    WalletError,
    UnsupportedPathTypeError,
    DerivationError,
    InvalidMnemonicError,
    NoMnemonicError,
    NoChainSelectedError,
    InvalidStateError,
    WalletIndexError,
    StorageError,
    ConfigError,
)
from .types import KeyPair, StorageSnapshot, SessionState, IntentResult
from .storage import KeyValueStore, MemoryKeyValueStore, FileKeyValueStore, WalletStore
from .log import configure_logging

__all__ = [
    "Config",
    "ErrorKind",
    "WalletError",
    "UnsupportedPathTypeError",
    "DerivationError",
    "InvalidMnemonicError",
    "NoMnemonicError",
    "NoChainSelectedError",
    "InvalidStateError",
    "WalletIndexError",
    "StorageError",
    "ConfigError",
    "KeyPair",
    "StorageSnapshot",
    "SessionState",
    "IntentResult",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "FileKeyValueStore",
    "WalletStore",
    "configure_logging",
]
