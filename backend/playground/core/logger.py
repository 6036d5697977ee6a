"""
Shared application logger.
"""

import logging
import sys

from playground.core.config import get_settings

_LOGGER_NAME = "playground"


def _build_logger() -> logging.Logger:
    settings = get_settings()
    log = logging.getLogger(_LOGGER_NAME)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        log.addHandler(handler)
    log.setLevel(settings.LOG_LEVEL.upper())
    return log


logger = _build_logger()
