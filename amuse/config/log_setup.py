# amuse/config/log_setup.py
from __future__ import annotations

import logging

from amuse.config import AMUSE_LOG_LEVEL

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Configure logging once, at the top of the app (CLI entry or embedding host)."""
    global _configured
    if _configured:
        return
    logging.basicConfig(
        level=(level or AMUSE_LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    # httpx logs every provider read at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _configured = True
