"""
Deterministic key pair derivation.

Pure functions: no I/O, no logging of inputs or outputs. Callers are
responsible for validating the mnemonic before deriving from it.
"""

from typing import Sequence, Union

from ..chains import get_chain_family
from ..core.exceptions import DerivationError
from ..core.types import KeyPair
from ..utils.slip10 import derive_path, HARDENED_OFFSET
from .mnemonic import MNEMONIC_GEN

PATH_TEMPLATE = "m/44'/{path_type}'/0'/{index}'"


def build_derivation_path(path_type: str, account_index: int) -> str:
    """BIP44 path with every component hardened"""
    return PATH_TEMPLATE.format(path_type=path_type, index=account_index)


def mnemonic_to_seed(mnemonic: Union[str, Sequence[str]]) -> bytes:
    """BIP39 seed with an empty passphrase"""
    phrase = mnemonic if isinstance(mnemonic, str) else " ".join(mnemonic)
    return MNEMONIC_GEN.to_seed(phrase, passphrase="")


def derive_wallet(path_type: str, mnemonic: Union[str, Sequence[str]], account_index: int) -> KeyPair:
    """
    Derive the key pair for one account.

    Args:
        path_type: BIP44 coin type ("501" Solana, "60" Ethereum)
        mnemonic: Validated phrase, as a string or word sequence
        account_index: Non-negative account index (last path component)

    Returns:
        KeyPair

    Raises:
        UnsupportedPathTypeError: path_type has no chain family
        DerivationError: Any failure computing the seed, path or key pair
    """
    family = get_chain_family(path_type)

    try:
        if isinstance(account_index, bool) or not isinstance(account_index, int):
            raise TypeError(f"account index must be an int, got {type(account_index).__name__}")
        if not 0 <= account_index < HARDENED_OFFSET:
            raise ValueError(f"account index out of range: {account_index}")

        seed = mnemonic_to_seed(mnemonic)
        path = build_derivation_path(path_type, account_index)
        derived_key = derive_path(seed, path)
        public_key, private_key = family.encode_keypair(derived_key)
    except Exception as e:
        raise DerivationError("Failed to generate wallet", cause=e) from e

    return KeyPair(public_key=public_key, private_key=private_key, derivation_path=path)
