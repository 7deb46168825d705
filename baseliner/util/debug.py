"""Debug logging helpers."""

from __future__ import annotations

import logging
import os

LOGGER = logging.getLogger(__name__)


def debug_enabled() -> bool:
    """Check debug mode env flag."""
    return os.environ.get("BASELINER_DEBUG", "").strip() == "1"


def debug_log(message: str) -> None:
    """Emit debug logs in debug mode only."""
    if debug_enabled():
        LOGGER.debug("%s", message)


def configure_logging() -> None:
    """Route debug logs to stderr when ``BASELINER_DEBUG=1``."""
    if debug_enabled():
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
        LOGGER.setLevel(logging.DEBUG)
