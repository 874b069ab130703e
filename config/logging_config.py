"""Process-wide logging setup."""

import logging

from config.defaults import LOG_FORMAT, LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL):
    """Configure the root logger once; later calls are no-ops."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
    )
