"""Solana key pair encoding"""

from base58 import b58encode
from nacl.signing import SigningKey

from .base import ChainFamily


class SolanaFamily(ChainFamily):
    """Ed25519 key pair, both halves Base58-encoded"""

    path_type = "501"
    name = "Solana"

    def encode_keypair(self, derived_key):
        signing_key = SigningKey(derived_key)
        verify_key = signing_key.verify_key
        # 64-byte secret key layout used by Solana wallets: seed || public key
        secret_key_bytes = signing_key.encode() + verify_key.encode()
        public_key = b58encode(verify_key.encode()).decode("utf-8")
        private_key = b58encode(secret_key_bytes).decode("utf-8")
        return public_key, private_key
