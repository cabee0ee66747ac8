import logging
import os
import sys

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def setup_logger(level: int = logging.INFO, name: str = "rect_corrector") -> logging.Logger:
    """Configure the `rect_corrector` logger and return it.

    Safe to call any number of times. Each call re-reads
    RECT_CORRECTOR_LOG_LEVEL (overrides `level`) and RECT_CORRECTOR_LOG_CATS
    (comma-separated child names to let through), and reuses the one stderr
    handler it installed earlier.
    """
    logger = logging.getLogger(name)

    env_level = (os.getenv("RECT_CORRECTOR_LOG_LEVEL") or "").strip().lower()
    logger.setLevel(_LEVELS.get(env_level, level))

    handler: logging.StreamHandler | None = None
    for h in logger.handlers:
        if isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr:
            handler = h
            break

    if handler is None:
        handler = logging.StreamHandler(stream=sys.stderr)
        logger.addHandler(handler)

    handler.setFormatter(
        logging.Formatter(
            fmt="[%(asctime)s] %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    handler.filters.clear()
    cats = (os.getenv("RECT_CORRECTOR_LOG_CATS") or "").strip()
    if cats:
        allowed = {c.strip() for c in cats.split(",") if c.strip()}

        class _CategoryFilter(logging.Filter):
            def filter(self, record: logging.LogRecord) -> bool:
                # "rect_corrector.layout" -> "layout"
                return record.name.rsplit(".", 1)[-1] in allowed

        handler.addFilter(_CategoryFilter())

    # Host applications get corrector logs only through this handler.
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    base = setup_logger()
    return base if not name else base.getChild(name)
