# objmesh/logging_config.py
"""
Logging setup for applications embedding objmesh.

The library itself only creates module loggers under the "objmesh" namespace and
never configures handlers; call setup_logging() to see importer messages.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the "objmesh" logger with a stdout handler and an optional file.

    Existing handlers are closed and removed first, so calling this twice
    neither duplicates output nor leaves the previous log file open.
    """
    logger = logging.getLogger("objmesh")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
