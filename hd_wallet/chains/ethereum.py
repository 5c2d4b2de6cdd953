"""Ethereum key pair encoding"""

from eth_account import Account

from .base import ChainFamily


class EthereumFamily(ChainFamily):
    """Derived key used directly as a secp256k1 private key"""

    path_type = "60"
    name = "Ethereum"

    def encode_keypair(self, derived_key):
        account = Account.from_key(derived_key)
        # Plain hex, no 0x prefix, independent of the hexbytes version
        return account.address, bytes(derived_key).hex()
