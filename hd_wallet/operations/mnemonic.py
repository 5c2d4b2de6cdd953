"""BIP39 mnemonic generation and validation"""

from typing import Tuple

from mnemonic import Mnemonic

from ..core.config import Config
from ..core.exceptions import InvalidMnemonicError
from ..core.types import MNEMONIC_WORD_COUNT

# Standard BIP39 English wordlist
MNEMONIC_GEN = Mnemonic("english")


def normalize_mnemonic(raw: str) -> Tuple[str, ...]:
    """Split user input into lowercase words, collapsing whitespace"""
    return tuple(raw.lower().split())


def generate_mnemonic() -> Tuple[str, ...]:
    """Generate a fresh 12-word mnemonic"""
    phrase = MNEMONIC_GEN.generate(strength=Config.MNEMONIC_STRENGTH)
    return tuple(phrase.split(" "))


def validate_mnemonic(raw: str) -> Tuple[str, ...]:
    """
    Validate a user-supplied recovery phrase.

    Args:
        raw: Phrase as typed (any whitespace, any case)

    Returns:
        Normalised word tuple

    Raises:
        InvalidMnemonicError: Wrong word count, unknown word or bad checksum
    """
    words = normalize_mnemonic(raw)
    if len(words) != MNEMONIC_WORD_COUNT:
        raise InvalidMnemonicError(
            f"Recovery phrase must have {MNEMONIC_WORD_COUNT} words, got {len(words)}"
        )
    try:
        valid = MNEMONIC_GEN.check(" ".join(words))
    except (ValueError, LookupError):
        valid = False
    if not valid:
        raise InvalidMnemonicError("Invalid recovery phrase")
    return words

