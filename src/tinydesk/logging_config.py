import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Per-request chatter from the HTTP backend.
NOISY_LOGGERS = ("urllib3",)


def resolve_level(level_name: Optional[str], default_level: int = logging.INFO) -> int:
    """
    Map a level name ('debug', 'WARNING' ...) to a logging level.

    ``LOG_LEVEL`` in the environment beats the configured name; unknown
    names fall back to ``default_level``.
    """
    name = (os.getenv("LOG_LEVEL") or level_name or "").upper()
    level = logging.getLevelName(name) if name else default_level
    return level if isinstance(level, int) else default_level


def setup_logging(level_name: Optional[str] = None) -> None:
    """Configure root logging once for a scrape run (usually ``Settings.log_level``)."""
    if logging.getLogger().handlers:
        # Already configured (e.g. by pytest).
        return

    logging.basicConfig(level=resolve_level(level_name), format=LOG_FORMAT)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
