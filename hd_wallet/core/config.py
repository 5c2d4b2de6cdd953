"""Configuration loading and management"""

import os
import logging
from pathlib import Path

from dotenv import load_dotenv

from .exceptions import ConfigError


class Config:
    """Settings shared by the CLI and sessions, resolved from the environment"""

    # BIP44 coin type -> human-readable chain name
    PATH_TYPE_NAMES = {
        "501": "Solana",
        "60": "Ethereum",
    }

    # 12 words
    MNEMONIC_STRENGTH = 128

    DEFAULT_DIR_NAME = ".hd-wallet"
    DEFAULT_LOG_LEVEL = "WARNING"

    def __init__(self, store_dir=None, env_file=None):
        """
        Args:
            store_dir: Explicit storage directory (overrides environment)
            env_file: Optional dotenv file to load before reading variables
        """
        load_dotenv()
        if env_file:
            load_dotenv(env_file)

        self._store_dir = Path(store_dir) if store_dir else None

    @property
    def store_dir(self):
        """Directory holding the persisted wallet records"""
        if self._store_dir is not None:
            return self._store_dir

        env_path = os.getenv("HD_WALLET_HOME")
        if env_path:
            return Path(env_path).expanduser()

        local = Path.cwd() / self.DEFAULT_DIR_NAME
        if local.exists():
            return local

        return Path.home() / self.DEFAULT_DIR_NAME

    @property
    def log_level(self):
        """Numeric logging level from HD_WALLET_LOG_LEVEL"""
        name = os.getenv("HD_WALLET_LOG_LEVEL", self.DEFAULT_LOG_LEVEL).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigError(f"Unknown log level: {name}")
        return level

    def chain_name(self, path_type):
        """Display name for a path type, empty if unknown"""
        return self.PATH_TYPE_NAMES.get(path_type, "")
