import logging

import pytest

from loggers.config import configure_loggers

HAND_LOGGER = "loggers.hand_logger"


@pytest.fixture(autouse=True)
def restore_level():
    logger = logging.getLogger(HAND_LOGGER)
    original = logger.level
    yield
    logger.setLevel(original)


def test_defaults():
    configure_loggers()
    assert logging.getLogger(HAND_LOGGER).level == logging.INFO


def test_level_names_and_constants():
    configure_loggers({"hand": "debug"})
    assert logging.getLogger(HAND_LOGGER).level == logging.DEBUG

    configure_loggers({"hand": logging.ERROR})
    assert logging.getLogger(HAND_LOGGER).level == logging.ERROR


def test_unknown_level_name():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_loggers({"hand": "chatty"})
