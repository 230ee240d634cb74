"""Logging setup.

The app owns the whole terminal while it runs, so log records only go to a
file, and only when one is asked for.
"""

import logging
from pathlib import Path
from typing import Union

LOGGER_NAME = "ticktty"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(log_path: Union[str, Path], level: int = logging.DEBUG) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
