from __future__ import annotations

import logging
import sys


LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_ROOT_NAME = "wbr"


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    logger = logging.getLogger(_ROOT_NAME)
    logger.setLevel(level)
    if not any(getattr(h, "_wbr_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._wbr_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.propagate = False
    return logger
