"""
Logging setup shared by every module.

Call `setup_logging(config)` once at startup, then use
`get_logger(__name__)` wherever a logger is needed.
"""

import logging
import sys

from app.config import Config

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(config: Config) -> None:
    """Configure the root logger from config (level and format)."""
    level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT))

    root = logging.getLogger()
    # Replace handlers so repeated app creation (tests, reload) doesn't duplicate lines
    root.handlers = [handler]
    root.setLevel(level)

    for name in _UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(level)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
