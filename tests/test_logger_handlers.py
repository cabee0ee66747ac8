import logging
import sys

from rect_corrector import logger as rc_logger


def test_setup_logger_idempotent_handlers():
    """Calling setup_logger() repeatedly should leave exactly one stderr StreamHandler."""
    base = rc_logger.setup_logger(level=logging.DEBUG)
    _ = rc_logger.setup_logger(level=logging.DEBUG)

    handlers = [
        h
        for h in base.handlers
        if isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
    ]

    assert len(handlers) == 1
    assert base.propagate is False


def test_env_level_overrides_argument(monkeypatch):
    monkeypatch.setenv("RECT_CORRECTOR_LOG_LEVEL", "warning")

    base = rc_logger.setup_logger(level=logging.DEBUG)

    assert base.level == logging.WARNING


def test_unknown_env_level_keeps_argument(monkeypatch):
    monkeypatch.setenv("RECT_CORRECTOR_LOG_LEVEL", "chatty")

    base = rc_logger.setup_logger(level=logging.ERROR)

    assert base.level == logging.ERROR


def test_category_filter_passes_only_listed_children(monkeypatch):
    monkeypatch.setenv("RECT_CORRECTOR_LOG_CATS", "layout, settings")
    base = rc_logger.setup_logger()
    handler = next(h for h in base.handlers if getattr(h, "stream", None) is sys.stderr)

    def _record(name: str) -> logging.LogRecord:
        return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)

    assert handler.filter(_record("rect_corrector.layout"))
    assert handler.filter(_record("rect_corrector.settings"))
    assert not handler.filter(_record("rect_corrector.other"))


def test_get_logger_returns_children():
    assert rc_logger.get_logger().name == "rect_corrector"
    assert rc_logger.get_logger("layout").name == "rect_corrector.layout"
