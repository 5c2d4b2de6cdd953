"""
Wallet persistence.

Records are stored as plaintext JSON under three independent keys.
The key names are part of the on-disk format and must not change.
"""

import os
import json
import logging
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Sequence

from .exceptions import StorageError
from .types import KeyPair, StorageSnapshot

logger = logging.getLogger(__name__)

WALLETS_KEY = "wallets"
MNEMONICS_KEY = "mnemonics"
CHAIN_KEY = "chain"

# Secure file permissions (Unix only)
SECURE_FILE_MODE = 0o600

# Deepest valid record is the wallets array of objects
MAX_RECORD_DEPTH = 8


def _set_secure_permissions(filepath: Path) -> None:
    """Set restrictive file permissions on Unix systems."""
    if os.name == 'posix':
        try:
            os.chmod(filepath, SECURE_FILE_MODE)
        except OSError:
            pass


def _parse_record(raw: str):
    """json.loads with a nesting limit checked before parsing"""
    depth = 0
    in_string = False
    escaped = False
    for ch in raw:
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch in "[{":
            depth += 1
            if depth > MAX_RECORD_DEPTH:
                raise ValueError("record nested too deeply")
        elif ch in "]}":
            depth -= 1
    return json.loads(raw)


class KeyValueStore(ABC):
    """String-valued durable medium"""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored string, or None if the key is absent"""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove a key; removing an absent key is a no-op"""
        pass


class MemoryKeyValueStore(KeyValueStore):
    """Dict-backed store for tests and throwaway sessions"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key):
        return self._data.get(key)

    def set_item(self, key, value):
        self._data[key] = value

    def remove_item(self, key):
        self._data.pop(key, None)


class FileKeyValueStore(KeyValueStore):
    """One file per key (``<data_dir>/<key>.json``), replaced atomically on write"""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get_item(self, key):
        path = self._path(key)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    def set_item(self, key, value):
        path = self._path(key)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                _set_secure_permissions(Path(tmp_name))
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e

    def remove_item(self, key):
        path = self._path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            raise StorageError(f"Failed to remove {path}: {e}") from e


class WalletStore:
    """Reads and writes the wallet snapshot on a key-value medium"""

    def __init__(self, kv: KeyValueStore):
        self.kv = kv

    def load(self) -> Optional[StorageSnapshot]:
        """
        Load the stored snapshot.

        Returns:
            StorageSnapshot, or None unless all three records are present
            and well-formed. A partial snapshot is never returned.
        """
        try:
            raw_wallets = self.kv.get_item(WALLETS_KEY)
            raw_mnemonic = self.kv.get_item(MNEMONICS_KEY)
            raw_chain = self.kv.get_item(CHAIN_KEY)
        except ValueError as e:
            logger.warning(f"Ignoring undecodable wallet snapshot: {type(e).__name__}")
            return None

        if not (raw_wallets and raw_mnemonic and raw_chain):
            missing = [
                key for key, raw in (
                    (WALLETS_KEY, raw_wallets),
                    (MNEMONICS_KEY, raw_mnemonic),
                    (CHAIN_KEY, raw_chain),
                ) if not raw
            ]
            if len(missing) < 3:
                logger.warning(f"Ignoring partial wallet snapshot, missing: {', '.join(missing)}")
            return None

        try:
            wallet_items = _parse_record(raw_wallets)
            words = _parse_record(raw_mnemonic)
            chain = _parse_record(raw_chain)
            if not isinstance(wallet_items, list):
                raise TypeError("wallets record must be an array")
            if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
                raise TypeError("mnemonics record must be an array of strings")
            if not isinstance(chain, str):
                raise TypeError("chain record must be a string")
            wallets = tuple(KeyPair.from_dict(item) for item in wallet_items)
        except (ValueError, KeyError, TypeError, RecursionError) as e:
            # Message only; record contents are secret
            logger.warning(f"Ignoring unreadable wallet snapshot: {type(e).__name__}")
            return None

        return StorageSnapshot(wallets=wallets, mnemonic=tuple(words), chain=chain)

    def save(
        self,
        wallets: Sequence[KeyPair],
        mnemonic: Optional[Sequence[str]] = None,
        chain: Optional[str] = None,
    ) -> None:
        """
        Persist the wallet list, and the mnemonic/chain when given.

        Usage:
            save(wallets, words, chain) on first wallet generation
            save(wallets) after adding or deleting a wallet
        """
        updates = [(WALLETS_KEY, json.dumps([w.to_dict() for w in wallets]))]
        if mnemonic:
            updates.append((MNEMONICS_KEY, json.dumps(list(mnemonic))))
        if chain:
            updates.append((CHAIN_KEY, json.dumps(chain)))

        previous = {key: self._read_previous(key) for key, _ in updates}
        written = []
        try:
            for key, value in updates:
                self.kv.set_item(key, value)
                written.append(key)
        except StorageError:
            self._restore(previous, written)
            raise

    def _read_previous(self, key):
        """Current raw record for rollback; an undecodable one counts as absent"""
        try:
            return self.kv.get_item(key)
        except ValueError:
            return None

    def _restore(self, previous, keys):
        """Best-effort rollback of records already changed by a failed save or clear"""
        for key in keys:
            try:
                if previous[key] is None:
                    self.kv.remove_item(key)
                else:
                    self.kv.set_item(key, previous[key])
            except StorageError:
                logger.error(f"Could not roll back '{key}' record")

    def clear(self) -> None:
        """Remove the wallet and mnemonic records. The chain record is kept."""
        keys = (WALLETS_KEY, MNEMONICS_KEY)
        previous = {key: self._read_previous(key) for key in keys}
        removed = []
        try:
            for key in keys:
                self.kv.remove_item(key)
                removed.append(key)
        except StorageError:
            self._restore(previous, removed)
            raise
