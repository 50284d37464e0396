"""Shared fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_fileutils_logger():
    """Undo setup_logging() so handlers don't leak between tests."""
    yield
    logger = logging.getLogger("fileutils")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
