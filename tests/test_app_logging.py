"""Tests for logging configuration."""

import io
import logging

from dish_planner.app_logging import LOGGER_NAME, configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging("DEBUG")
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG
    assert logger.propagate is False


def test_engine_records_use_configured_format() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    stream = io.StringIO()

    configure_logging("INFO", stream=stream)
    logging.getLogger("dish_planner.services.generation").info("Generated 3 dish(es)")
    logging.getLogger("dish_planner.services.generation").debug("hidden")

    assert stream.getvalue() == (
        "INFO: dish_planner.services.generation: Generated 3 dish(es)\n"
    )
    logger.handlers.clear()
