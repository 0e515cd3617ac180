"""Logging setup shared by the API process and the CLI entrypoint."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAME = "app"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a single stream handler to the package logger."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level if isinstance(level, int) else level.upper())

    # Avoid duplicate handlers on dev reload
    if logger.handlers:
        return logger

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(stream_handler)

    return logger
