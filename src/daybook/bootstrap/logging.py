from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from ..config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_FILE_NAME = "daybook.log"
MAX_LOG_BYTES = 1_000_000
LOG_BACKUPS = 5

_INITIALIZED = False


def _build_handlers(log_file: Path) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handlers: List[logging.Handler] = [
        logging.StreamHandler(),
        RotatingFileHandler(log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(level: Optional[str] = None, *, log_dir: Optional[Path] = None) -> None:
    """Attach console and rotating file handlers to the root logger, once per process.

    ``level`` defaults to ``DAYBOOK_LOG_LEVEL``; an unknown level name raises ``ValueError``.
    """

    global _INITIALIZED
    if _INITIALIZED:
        return

    settings = get_settings().logging
    level_name = (level or settings.level).upper()
    directory = log_dir or settings.directory
    directory.mkdir(parents=True, exist_ok=True)
    log_file = directory / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(level_name)
    for handler in _build_handlers(log_file):
        root.addHandler(handler)

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging at %s to %s", level_name, log_file)
