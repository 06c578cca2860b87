"""Logging configuration.

Modules log through `logging.getLogger(__name__)`; only the entry point calls
`setup_logging`, so library use of the core stays silent by default.
"""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Configure a single stderr handler for the application.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
    """

    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        format=_FORMAT,
        stream=sys.stderr,
        level=log_level,
    )
