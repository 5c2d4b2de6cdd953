"""Wallet type definitions and helpers"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple

from .exceptions import ErrorKind, WalletError

# Mnemonic length supported by the session (128 bits of entropy)
MNEMONIC_WORD_COUNT = 12


@dataclass(frozen=True)
class KeyPair:
    """
    A derived wallet.

    Attributes:
        public_key: Base58 public key (Solana) or checksummed address (Ethereum)
        private_key: Base58 64-byte secret (Solana) or hex key without prefix (Ethereum)
        derivation_path: BIP44 path used at creation time
    """

    public_key: str
    private_key: str
    derivation_path: str

    def to_dict(self) -> dict:
        """Convert to the persisted record shape"""
        return {
            "publicKey": self.public_key,
            "privateKey": self.private_key,
            "path": self.derivation_path,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "KeyPair":
        """Build from a persisted record, raising on a malformed one"""
        if not isinstance(data, dict):
            raise TypeError("wallet record must be an object")
        values = (data["publicKey"], data["privateKey"], data["path"])
        if not all(isinstance(v, str) for v in values):
            raise TypeError("wallet record fields must be strings")
        return cls(*values)

    @property
    def account_index(self) -> int:
        """Final path component, without the hardened marker"""
        return int(self.derivation_path.rsplit("/", 1)[-1].rstrip("'"))


@dataclass(frozen=True)
class StorageSnapshot:
    """The three persisted records, only ever loaded together"""

    wallets: Tuple[KeyPair, ...]
    mnemonic: Tuple[str, ...]
    chain: str


class SessionState(Enum):
    """Coarse session lifecycle"""

    NO_CHAIN_SELECTED = "no_chain_selected"
    CHAIN_SELECTED = "chain_selected"
    HAS_WALLETS = "has_wallets"


@dataclass(frozen=True)
class IntentResult:
    """
    Outcome of a session intent.

    Callers branch on ``kind``; it is None exactly when ``ok`` is True.
    """

    ok: bool
    value: Any = None
    error: Optional[WalletError] = field(default=None, compare=False)

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""

    @classmethod
    def success(cls, value=None) -> "IntentResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: WalletError) -> "IntentResult":
        return cls(ok=False, error=error)
