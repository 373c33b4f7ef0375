import logging

import pytest

from storesearch.infra.logger import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("storesearch")
    saved = (logger.level, logger.propagate, list(logger.handlers))
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(saved[0])
    logger.propagate = saved[1]
    for handler in saved[2]:
        logger.addHandler(handler)


def test_setup_logging_console_only(package_logger):
    logger = setup_logging("debug")

    assert logger is package_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_setup_logging_writes_file(package_logger, tmp_path):
    log_dir = tmp_path / "logs"
    setup_logging("INFO", log_dir, console=False)

    logging.getLogger("storesearch.search").info("hello from test")
    for handler in package_logger.handlers:
        handler.flush()

    content = (log_dir / "storesearch.log").read_text(encoding="utf-8")
    assert "hello from test" in content
    assert "storesearch.search" in content


def test_setup_logging_is_repeatable(package_logger, tmp_path):
    setup_logging("INFO", tmp_path)
    setup_logging("WARNING", tmp_path)

    assert len(package_logger.handlers) == 2
    assert package_logger.level == logging.WARNING


def test_setup_logging_rejects_unknown_level(package_logger):
    with pytest.raises(ValueError):
        setup_logging("LOUD")
