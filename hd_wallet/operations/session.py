"""Wallet session: in-memory state plus the intents that change it"""

import logging
from typing import List, Optional, Tuple

from ..chains import get_chain_family
from ..core.config import Config
from ..core.exceptions import (
    ErrorKind,
    InvalidStateError,
    NoChainSelectedError,
    NoMnemonicError,
    WalletError,
    WalletIndexError,
)
from ..core.storage import WalletStore
from ..core.types import IntentResult, KeyPair, SessionState
from .derivation import derive_wallet
from .mnemonic import generate_mnemonic, validate_mnemonic

logger = logging.getLogger(__name__)

COPY_TARGETS = ("mnemonic", "public", "private")

# Failures worth surfacing even at the default log level
LOUD_FAILURES = (ErrorKind.DERIVATION_FAILED, ErrorKind.STORAGE_FAILED)


class WalletSession:
    """
    Owns the selected chain, active mnemonic, wallet list and visibility flags.

    Every intent runs to completion and returns an IntentResult. On failure
    neither memory nor storage is modified: new state is built aside,
    persisted, and only then committed. Callers must not run intents on the
    same session concurrently.

    Account indices come from the wallet list length, so deleting the last
    wallet and adding a new one derives the same key pair again.
    """

    def __init__(self, store: WalletStore, config: Optional[Config] = None):
        """
        Args:
            store: Durable mirror of the session, written after every mutation
            config: Shared settings (created if None)
        """
        self.store = store
        self.config = config or Config()

        self._chain = ""
        self._mnemonic: Tuple[str, ...] = ()
        self._wallets: List[KeyPair] = []
        self._visibility: List[bool] = []

    # Read-only views

    @property
    def chain(self) -> str:
        return self._chain

    @property
    def chain_name(self) -> str:
        return self.config.chain_name(self._chain)

    @property
    def mnemonic_words(self) -> Tuple[str, ...]:
        return self._mnemonic

    @property
    def wallets(self) -> Tuple[KeyPair, ...]:
        return tuple(self._wallets)

    @property
    def visibility(self) -> Tuple[bool, ...]:
        return tuple(self._visibility)

    @property
    def state(self) -> SessionState:
        if self._wallets:
            return SessionState.HAS_WALLETS
        if self._chain:
            return SessionState.CHAIN_SELECTED
        return SessionState.NO_CHAIN_SELECTED

    # Intents

    def hydrate(self) -> IntentResult:
        """
        Restore state from storage, once at session start.

        Value is True if a full snapshot was restored. Visibility flags are
        always reset to False.
        """
        try:
            snapshot = self.store.load()
        except WalletError as e:
            return self._fail("hydrate", e)

        if snapshot is None:
            logger.debug("No stored wallet snapshot")
            return IntentResult.success(False)

        self._chain = snapshot.chain
        self._mnemonic = snapshot.mnemonic
        self._wallets = list(snapshot.wallets)
        self._visibility = [False] * len(snapshot.wallets)
        logger.info(f"Restored {len(self._wallets)} wallet(s) for chain {self._chain}")
        return IntentResult.success(True)

    def select_chain(self, selector: str) -> IntentResult:
        """Set the chain. Rejected once wallets exist; never persisted on its own."""
        try:
            get_chain_family(selector)
            if self._wallets:
                raise InvalidStateError(
                    f"Chain {self._chain} already has wallets; clear them before switching chains"
                )
        except WalletError as e:
            return self._fail("select_chain", e)

        self._chain = selector
        logger.info(f"Selected chain {selector}")
        return IntentResult.success(selector)

    def generate_initial(self, raw_input: str = "") -> IntentResult:
        """
        Derive the first wallet from an imported or freshly generated mnemonic.

        Args:
            raw_input: Recovery phrase to import; empty generates a new one

        Value is the new KeyPair. Persists wallets, mnemonic and chain.
        """
        try:
            if not self._chain:
                raise NoChainSelectedError("Select a chain before generating a wallet")
            if self._wallets:
                raise InvalidStateError("Wallets already exist; use add_wallet")

            raw = (raw_input or "").strip()
            words = validate_mnemonic(raw) if raw else generate_mnemonic()

            wallet = derive_wallet(self._chain, words, len(self._wallets))
            wallets = self._wallets + [wallet]
            self.store.save(wallets, words, self._chain)
        except WalletError as e:
            return self._fail("generate_initial", e)

        self._mnemonic = words
        self._commit_append(wallets)
        logger.info(f"Generated wallet at {wallet.derivation_path}")
        return IntentResult.success(wallet)

    def add_wallet(self) -> IntentResult:
        """Derive the next wallet from the active mnemonic. Persists wallets only."""
        try:
            if not self._mnemonic:
                raise NoMnemonicError("No mnemonic found. Please generate a wallet first.")

            wallet = derive_wallet(self._chain, self._mnemonic, len(self._wallets))
            wallets = self._wallets + [wallet]
            self.store.save(wallets)
        except WalletError as e:
            return self._fail("add_wallet", e)

        self._commit_append(wallets)
        logger.info(f"Added wallet at {wallet.derivation_path}")
        return IntentResult.success(wallet)

    def delete_wallet(self, index: int) -> IntentResult:
        """
        Remove one wallet, keeping the order of the rest.

        The caller is responsible for confirming with the user first.
        Remaining wallets keep their recorded derivation paths. Value is
        the removed KeyPair.
        """
        try:
            self._check_index(index)
            wallets = self._wallets[:index] + self._wallets[index + 1:]
            self.store.save(wallets)
        except WalletError as e:
            return self._fail("delete_wallet", e)

        removed = self._wallets[index]
        self._wallets = wallets
        del self._visibility[index]
        logger.info(f"Deleted wallet {index} ({removed.derivation_path})")
        return IntentResult.success(removed)

    def clear_all(self) -> IntentResult:
        """
        Drop every wallet and the mnemonic, in memory and in storage.

        The caller is responsible for confirming with the user first.
        The selected chain survives, both in memory and in storage.
        """
        try:
            self.store.clear()
        except WalletError as e:
            return self._fail("clear_all", e)

        count = len(self._wallets)
        self._wallets = []
        self._mnemonic = ()
        self._visibility = []
        logger.info(f"Cleared {count} wallet(s)")
        return IntentResult.success(count)

    def toggle_visibility(self, index: int) -> IntentResult:
        """Flip whether a private key is revealed. Value is the new flag."""
        try:
            self._check_index(index)
        except WalletError as e:
            return self._fail("toggle_visibility", e)

        self._visibility[index] = not self._visibility[index]
        return IntentResult.success(self._visibility[index])

    def copy_text(self, target: str, index: Optional[int] = None) -> IntentResult:
        """
        String for the presentation layer to put on the clipboard.

        Args:
            target: "mnemonic", "public" or "private"
            index: Wallet index, required for "public" and "private"
        """
        try:
            if target == "mnemonic":
                if not self._mnemonic:
                    raise NoMnemonicError("No mnemonic to copy")
                return IntentResult.success(" ".join(self._mnemonic))
            if target not in COPY_TARGETS:
                raise ValueError(f"Unknown copy target: {target}")
            self._check_index(index)
        except WalletError as e:
            return self._fail("copy_text", e)

        wallet = self._wallets[index]
        return IntentResult.success(wallet.public_key if target == "public" else wallet.private_key)

    # Internals

    def _commit_append(self, wallets):
        self._wallets = wallets
        self._visibility.append(False)

    def _check_index(self, index):
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._wallets):
            raise WalletIndexError(f"No wallet at index {index} (have {len(self._wallets)})")

    def _fail(self, intent, error):
        level = logging.WARNING if error.kind in LOUD_FAILURES else logging.INFO
        logger.log(level, f"{intent} failed: {error.kind.value}")
        return IntentResult.failure(error)
