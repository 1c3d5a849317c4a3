"""Logging configuration for the engine's operator-facing log lines."""

import logging
from typing import TextIO

LOGGER_NAME = "dish_planner"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO", stream: TextIO | None = None) -> None:
    """Attach one stream handler to the engine logger.

    Repeated calls only adjust the level, so every container built in a
    process shares the first handler.
    """
    engine_logger = logging.getLogger(LOGGER_NAME)
    engine_logger.setLevel(level)
    engine_logger.propagate = False
    for existing in engine_logger.handlers:
        existing.setLevel(level)
    if engine_logger.handlers:
        return
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    engine_logger.addHandler(handler)
