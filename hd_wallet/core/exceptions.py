"""Custom exceptions for HD Wallet"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure kinds an intent can report"""

    UNSUPPORTED_PATH_TYPE = "unsupported_path_type"
    DERIVATION_FAILED = "derivation_failed"
    INVALID_MNEMONIC = "invalid_mnemonic"
    NO_MNEMONIC_AVAILABLE = "no_mnemonic_available"
    NO_CHAIN_SELECTED = "no_chain_selected"
    INVALID_STATE = "invalid_state"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    STORAGE_FAILED = "storage_failed"
    CONFIG_INVALID = "config_invalid"


class WalletError(Exception):
    """Base exception for all wallet errors"""

    kind = None


class UnsupportedPathTypeError(WalletError):
    """Requested chain path type has no derivation strategy"""

    kind = ErrorKind.UNSUPPORTED_PATH_TYPE

    def __init__(self, path_type):
        super().__init__(f"Unsupported path type: {path_type}")
        self.path_type = path_type


class DerivationError(WalletError):
    """Seed, path or key pair computation failed"""

    kind = ErrorKind.DERIVATION_FAILED

    def __init__(self, message="Failed to generate wallet", cause=None):
        super().__init__(message)
        self.cause = cause


class InvalidMnemonicError(WalletError):
    """Recovery phrase failed wordlist or checksum validation"""

    kind = ErrorKind.INVALID_MNEMONIC


class NoMnemonicError(WalletError):
    """No active mnemonic to derive from"""

    kind = ErrorKind.NO_MNEMONIC_AVAILABLE


class NoChainSelectedError(WalletError):
    """Intent needs a chain but none has been selected"""

    kind = ErrorKind.NO_CHAIN_SELECTED


class InvalidStateError(WalletError):
    """Intent is not valid in the session's current state"""

    kind = ErrorKind.INVALID_STATE


class WalletIndexError(WalletError):
    """Wallet index outside the collection"""

    kind = ErrorKind.INDEX_OUT_OF_RANGE


class StorageError(WalletError):
    """Durable storage read/write errors"""

    kind = ErrorKind.STORAGE_FAILED


class ConfigError(WalletError):
    """Configuration-related errors"""

    kind = ErrorKind.CONFIG_INVALID
