import logging

import pytest


@pytest.fixture(autouse=True)
def reset_cmdwt_logger():
    # setup_logging binds handlers to the streams of the test that called it
    yield
    logger = logging.getLogger("cmdwt")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
