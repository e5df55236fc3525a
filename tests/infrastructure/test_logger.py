import logging

from gatelog.infrastructure.logger import logger, set_verbose


def test_package_logger_is_silent_by_default():
    assert logger.name == 'Gatelog'
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_set_verbose():
    previous = logger.level
    try:
        set_verbose(True)
        assert logger.level == logging.DEBUG
        set_verbose(False)
        assert logger.level == logging.INFO
    finally:
        logger.setLevel(previous)
