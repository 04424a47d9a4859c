"""
Tests for logging setup.
"""
import logging

import pytest

from core.logging import logger as logger_module
from core.logging.logger import ColoredFormatter, get_logger, is_verbose_logging, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    base_dir = logger_module._BASE_DIR
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    logger_module._VERBOSE = False
    logger_module._BASE_DIR = base_dir


def test_setup_logging_writes_file(tmp_path, restore_root_logger):
    log_dir = tmp_path / "logs"

    setup_logging(log_dir=log_dir)
    get_logger("tests.logging").info("hello from tests")
    for handler in logging.getLogger().handlers:
        handler.flush()

    log_file = log_dir / "playcover.log"
    assert log_file.exists()
    assert "hello from tests" in log_file.read_text(encoding="utf-8")
    assert logger_module.get_log_dir() == log_dir


def test_verbose_implies_debug(tmp_path, restore_root_logger):
    setup_logging(verbose=True, log_dir=tmp_path / "logs")

    assert is_verbose_logging() is True
    assert logging.getLogger().level == logging.DEBUG


def test_colored_formatter_keeps_levelname():
    formatter = ColoredFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "[FALLBACK] no screen", None, None)

    output = formatter.format(record)

    assert "no screen" in output
    assert record.levelname == "WARNING"
