"""
HD Wallet - Deterministic Solana/Ethereum key pairs from one BIP39 mnemonic
"""

from .core.config import Config
from .core.exceptions import ErrorKind, WalletError
from .core.types import KeyPair, IntentResult, SessionState
from .core.storage import FileKeyValueStore, MemoryKeyValueStore, WalletStore
from .operations.derivation import derive_wallet
from .operations.session import WalletSession

__version__ = "0.1.0"
__all__ = [
    "Config",
    "ErrorKind",
    "WalletError",
    "KeyPair",
    "IntentResult",
    "SessionState",
    "FileKeyValueStore",
    "MemoryKeyValueStore",
    "WalletStore",
    "derive_wallet",
    "WalletSession",
]
