from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

logger = logging.getLogger("wolcast")

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
MAX_BYTES = 1_000_000
BACKUPS = 3


def setup_logging(log_file: Optional[Path] = None, level: int = logging.WARNING) -> logging.Logger:
    """Attach a console handler and, if possible, a rotating file handler.

    Calling it again only changes the level.
    """
    logger.setLevel(level)
    if logger.handlers:
        return logger

    fmt = logging.Formatter(FORMAT)
    console = logging.StreamHandler()
    console.setFormatter(fmt)
    logger.addHandler(console)

    if log_file is None:
        return logger
    try:
        rotating = logging.handlers.RotatingFileHandler(str(log_file), maxBytes=MAX_BYTES, backupCount=BACKUPS)
    except OSError as e:
        logger.warning("Logging to console only, cannot open %s: %s", log_file, e)
        return logger
    rotating.setFormatter(fmt)
    logger.addHandler(rotating)
    return logger
