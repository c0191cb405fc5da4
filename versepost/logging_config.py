from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the ``versepost`` logger.

    Safe to call more than once; the handler is only added the first time.
    """
    logger = logging.getLogger("versepost")
    logger.setLevel(level)
    if not any(getattr(h, "_versepost", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._versepost = True
        logger.addHandler(handler)
    return logger
