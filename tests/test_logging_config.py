import logging

import pytest

from chartmath.logging_config import DEBUG_ENV_VAR, setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    logger = logging.getLogger("chartmath")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_setup_logging_does_not_duplicate_handlers():
    setup_logging(logging.INFO)
    logger = setup_logging(logging.INFO)
    assert logger.name == "chartmath"
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_debug_env_var_sets_default_level(monkeypatch):
    monkeypatch.setenv(DEBUG_ENV_VAR, "1")
    assert setup_logging().level == logging.DEBUG
    monkeypatch.delenv(DEBUG_ENV_VAR)
    assert setup_logging().level == logging.WARNING


def test_log_file(tmp_path):
    log_file = tmp_path / "chartmath.log"
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    assert len(logger.handlers) == 2
    logging.getLogger("chartmath.scales").debug("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")
