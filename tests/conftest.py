import logging

import pytest

from logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_foldcheck_logger():
    """CLI runs attach handlers to captured streams; drop them after each test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
