"""Shared pytest configuration."""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration made by a test."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == "lilufo":
            root_logger.removeHandler(handler)
            handler.close()
    structlog.reset_defaults()
