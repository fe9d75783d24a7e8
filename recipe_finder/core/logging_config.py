"""
Logging for the Recipe Finder API, launcher and import script.

Every module logs through get_logger(__name__) with one pipe-separated
stdout format. The level comes from the LOG_LEVEL environment variable
(a level name such as DEBUG or WARNING), INFO when unset or unknown.
"""
import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVEL_ENV = "LOG_LEVEL"

# TheMealDB calls go through requests; its per-connection INFO lines are noise here.
NOISY_LOGGERS = ("urllib3",)

FORMATTER = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def resolve_level(name: Optional[str], default: int = logging.INFO) -> int:
    if not name or not name.strip():
        return default
    level = logging.getLevelName(name.strip().upper())
    # getLevelName returns "Level X" text for names it does not know.
    return level if isinstance(level, int) else default


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(FORMATTER)
        logger.addHandler(handler)
        logger.setLevel(resolve_level(os.getenv(LOG_LEVEL_ENV)))

    return logger


def setup_logging(level: Optional[int] = None) -> None:
    """
    Root logging for run.py and scripts/.

    Args:
        level: Explicit level; falls back to LOG_LEVEL, then INFO.
    """
    if level is None:
        level = resolve_level(os.getenv(LOG_LEVEL_ENV))
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))
