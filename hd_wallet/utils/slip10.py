"""SLIP-0010 hierarchical derivation over the ed25519 curve"""

import hmac
import hashlib
import struct
from typing import List, Tuple

HARDENED_OFFSET = 0x80000000
ED25519_SEED_KEY = b"ed25519 seed"


def parse_path(path: str) -> List[int]:
    """
    Parse a derivation path into raw indices.

    ed25519 only supports hardened children, so every segment must carry
    the ``'`` marker.

    Args:
        path: Path such as ``m/44'/501'/0'/0'``

    Returns:
        List of indices without the hardened offset
    """
    segments = path.split("/")
    if not segments or segments[0] != "m":
        raise ValueError(f"Derivation path must start with 'm': {path}")

    indices = []
    for seg in segments[1:]:
        if not seg.endswith("'"):
            raise ValueError(f"ed25519 derivation requires hardened segments: {seg}")
        index = int(seg[:-1])
        if not 0 <= index < HARDENED_OFFSET:
            raise ValueError(f"Path index out of range: {index}")
        indices.append(index)
    return indices


def master_key(seed: bytes) -> Tuple[bytes, bytes]:
    """Master private key and chain code from a BIP39 seed"""
    I = hmac.new(ED25519_SEED_KEY, seed, hashlib.sha512).digest()
    return I[:32], I[32:]


def derive_child(key: bytes, chain_code: bytes, index: int) -> Tuple[bytes, bytes]:
    """One hardened child step"""
    data = b"\x00" + key + struct.pack(">L", index | HARDENED_OFFSET)
    I = hmac.new(chain_code, data, hashlib.sha512).digest()
    return I[:32], I[32:]


def derive_path(seed: bytes, path: str) -> bytes:
    """
    Derive the 32-byte private key at ``path``.

    Args:
        seed: BIP39 seed bytes
        path: Fully hardened derivation path

    Returns:
        32-byte key for the last path component
    """
    key, chain_code = master_key(seed)
    for index in parse_path(path):
        key, chain_code = derive_child(key, chain_code, index)
    return key
