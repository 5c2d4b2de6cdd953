"""High-level wallet operations"""

from .mnemonic import generate_mnemonic, validate_mnemonic
from .derivation import derive_wallet, build_derivation_path, mnemonic_to_seed
from .session import WalletSession

__all__ = [
    "generate_mnemonic",
    "validate_mnemonic",
    "derive_wallet",
    "build_derivation_path",
    "mnemonic_to_seed",
    "WalletSession",
]
