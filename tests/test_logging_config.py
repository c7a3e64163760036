"""
Tests for logging setup.
"""

import logging

import pytest

from linkedin_leads import config
from linkedin_leads.logging_config import APP_LOGGER, QUIET_LOGGERS, resolve_level, setup_logging


@pytest.fixture(autouse=True)
def restore_app_logger():
    logger = logging.getLogger(APP_LOGGER)
    saved = (list(logger.handlers), logger.level)
    logger.handlers[:] = [h for h in logger.handlers if not getattr(h, "_leads_handler", False)]
    yield
    logger.handlers[:], logger.level = saved


def _leads_handlers(logger):
    return [h for h in logger.handlers if getattr(h, "_leads_handler", False)]


def test_resolve_level_accepts_names_and_numbers():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(" Warning ") == logging.WARNING
    assert resolve_level(logging.ERROR) == logging.ERROR


def test_resolve_level_rejects_unknown_name():
    with pytest.raises(ValueError, match="Unknown log level"):
        resolve_level("chatty")


def test_resolve_level_defaults_to_config(monkeypatch):
    monkeypatch.setattr(config, "LOG_LEVEL", "ERROR")
    assert resolve_level(None) == logging.ERROR


def test_setup_logging_adds_one_handler_across_calls():
    logger = setup_logging("INFO")
    setup_logging("DEBUG")

    assert logger.name == APP_LOGGER
    assert len(_leads_handlers(logger)) == 1
    assert logger.level == logging.DEBUG


def test_setup_logging_quiets_third_party_loggers():
    setup_logging(logging.DEBUG)

    for name in QUIET_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_module_loggers_reach_app_handler(capsys):
    setup_logging("INFO")

    logging.getLogger("linkedin_leads.pipeline").info("Parsing master file...")

    out = capsys.readouterr().out
    assert "linkedin_leads.pipeline - INFO - Parsing master file..." in out
