"""Tests for logging configuration."""

import logging

from food_tracker.api.app import create_app
from food_tracker.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("food_tracker")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging("DEBUG")
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.level == logging.DEBUG


def test_create_app_configures_logging_from_settings(container) -> None:
    logger = logging.getLogger("food_tracker")
    logger.handlers.clear()
    container.settings.log_level = "WARNING"

    create_app(container)

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
