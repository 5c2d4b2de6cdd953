"""Utility functions for key derivation and display"""

from .slip10 import derive_path, parse_path, HARDENED_OFFSET
from .display import mask_secret

__all__ = [
    "derive_path",
    "parse_path",
    "HARDENED_OFFSET",
    "mask_secret",
]
