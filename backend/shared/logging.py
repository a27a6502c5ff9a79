"""
Logging setup for the MovieDB backend.

Modules log through ``logging.getLogger(__name__)``; this only configures
the root handler once per process.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR). Unknown names fall
            back to INFO.
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved)

    # httpx logs every request at INFO, including the humanID URL
    logging.getLogger("httpx").setLevel(max(resolved, logging.WARNING))
