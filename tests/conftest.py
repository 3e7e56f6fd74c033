import logging

import pytest

from classifier_engine.utils import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_engine_logger():
    """Drop handlers bound to a test's captured streams."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
