"""
Logging setup for the BMS Hub backend.

Modules log through ``logging.getLogger(__name__)``; this only configures
the root handler once at process start.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_configured = False


def setup_logging(level: str = "INFO", debug: bool = False) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name (e.g., "INFO", "WARNING")
        debug: Force DEBUG level regardless of ``level``
    """
    global _configured

    resolved = logging.DEBUG if debug else logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    if not _configured:
        logging.basicConfig(format=LOG_FORMAT)
        # httpx logs every PostgREST call at INFO
        logging.getLogger("httpx").setLevel(logging.WARNING)
        _configured = True

    logging.getLogger().setLevel(resolved)
