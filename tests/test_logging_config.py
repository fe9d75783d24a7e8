import logging
from recipe_finder.core.logging_config import get_logger, resolve_level, setup_logging


def test_resolve_level_accepts_level_names():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(" WARNING ") == logging.WARNING


def test_resolve_level_falls_back_on_unknown_or_empty():
    assert resolve_level("chatty") == logging.INFO
    assert resolve_level("") == logging.INFO
    assert resolve_level(None, default=logging.ERROR) == logging.ERROR


def test_get_logger_reads_level_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    logger = get_logger("recipe_finder.tests.env_level")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    # A second lookup does not stack handlers.
    assert get_logger("recipe_finder.tests.env_level").handlers == logger.handlers


def test_setup_logging_quiets_urllib3(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    setup_logging(logging.DEBUG)
    assert logging.getLogger("urllib3").level == logging.WARNING

    setup_logging(logging.ERROR)
    assert logging.getLogger("urllib3").level == logging.ERROR
