"""Logging setup for the ingestion scripts."""

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# PyMuPDF logs through "fitz", and through "pymupdf" on newer releases
QUIET_LOGGERS = ("fitz", "pymupdf")


def setup_logging(
    level: Union[str, int] = "INFO",
    log_file: Optional[Path] = None,
    quiet_loggers: Iterable[str] = QUIET_LOGGERS,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure the root logger for a segmentation run.

    Replaces any handlers already installed on the root logger, so calling
    this twice (e.g. from a script and then a notebook) does not double
    every record.

    Args:
        level: Level name (DEBUG shows every dropped paragraph) or number
        log_file: Optional file that receives the same records as the console
        quiet_loggers: Third-party loggers capped at WARNING
        stream: Console stream (default: sys.stdout)

    Returns:
        The configured root logger

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    if isinstance(level, str):
        log_level = logging.getLevelName(level.upper())
        if not isinstance(log_level, int):
            raise ValueError(f"Unknown log level: {level}")
    else:
        log_level = level

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logging.getLogger()
