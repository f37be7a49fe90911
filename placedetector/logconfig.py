"""
Logging configuration.

Library modules only create loggers; handlers are installed once per
process by calling setup_logging() from the host's startup code.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from typing import Optional, Union

LOG_LEVEL_ENV_VAR = "PLACEDETECTOR_LOG_LEVEL"

_lock = threading.Lock()
_configured = False


def setup_logging(level: Optional[Union[str, int]] = None) -> bool:
    """Configure human-readable logging for the process, at most once.

    Always sets the level of the "placedetector" logger. A stderr handler
    and the same level are installed on the root logger only when the root
    logger has no handlers yet; a host that already configured logging
    keeps its handlers and root level.

    Args:
        level: Level name or number. Defaults to $PLACEDETECTOR_LOG_LEVEL,
            then INFO.

    Returns:
        True if this call applied the settings above, False if an earlier
        call already had.
    """
    global _configured

    with _lock:
        if _configured:
            return False

        if level is None:
            level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
        if isinstance(level, str):
            level = getattr(logging, level.upper(), logging.INFO)

        if not logging.getLogger().handlers:
            logging.basicConfig(
                level=level,
                format="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
                handlers=[logging.StreamHandler(sys.stderr)],
            )
        logging.getLogger("placedetector").setLevel(level)

        _configured = True
        return True


__all__ = [
    "setup_logging",
]
