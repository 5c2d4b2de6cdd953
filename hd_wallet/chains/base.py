"""Abstract base class for chain family implementations"""

from abc import ABC, abstractmethod
from typing import Tuple


class ChainFamily(ABC):
    """
    Turns a derived 32-byte key into a chain-specific key pair encoding.

    Subclasses set ``path_type`` (BIP44 coin type) and ``name``.
    """

    path_type: str = ""
    name: str = ""

    @abstractmethod
    def encode_keypair(self, derived_key: bytes) -> Tuple[str, str]:
        """
        Encode a derived key for this chain.

        Args:
            derived_key: 32-byte key from SLIP-0010 derivation

        Returns:
            Tuple of (public_key, private_key) strings
        """
        pass

    def __repr__(self):
        return f"{type(self).__name__}(path_type={self.path_type!r})"
