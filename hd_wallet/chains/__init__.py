"""Chain family implementations, keyed by BIP44 coin type"""

from .base import ChainFamily
from .solana import SolanaFamily
from .ethereum import EthereumFamily
from ..core.exceptions import UnsupportedPathTypeError

CHAIN_FAMILIES = {
    family.path_type: family
    for family in (SolanaFamily(), EthereumFamily())
}


def get_chain_family(path_type):
    """
    Look up the strategy for a path type.

    Raises:
        UnsupportedPathTypeError: If no family is registered for path_type
    """
    try:
        return CHAIN_FAMILIES[path_type]
    except (KeyError, TypeError):
        raise UnsupportedPathTypeError(path_type) from None


def supported_path_types():
    return list(CHAIN_FAMILIES)


__all__ = [
    "ChainFamily",
    "SolanaFamily",
    "EthereumFamily",
    "CHAIN_FAMILIES",
    "get_chain_family",
    "supported_path_types",
]
