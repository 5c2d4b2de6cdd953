"""
Logging - console output for the hd_wallet package.

Loggers never receive mnemonics, private keys or derivation inputs;
only indices, paths and error kinds.
"""

import sys
import logging

PACKAGE_LOGGER = "hd_wallet"


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Send hd_wallet log records to stderr at the given level.

    Only the package logger is touched, so stdout stays free for values
    piped from ``hd-wallet copy``. Calling it again just updates the level.

    Args:
        level: Logging level (default: WARNING)

    Returns:
        The package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    for handler in package_logger.handlers:
        handler.setLevel(level)
    if package_logger.handlers:
        return package_logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    ))
    package_logger.addHandler(console_handler)
    return package_logger
