import logging
import sys
from typing import Optional

from pickupnews.config import CONFIG
from pickupnews.errors import ConfigurationError


ROOT_LOGGER_NAME = "pickupnews"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def resolve_log_level(level_name: str) -> int:
    """Map a level name such as 'info' to its logging constant."""
    normalized = (level_name or "").strip().lower()
    if normalized not in LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level '{level_name}'. Expected one of: {', '.join(LOG_LEVELS)}")
    return getattr(logging, normalized.upper())


def _configured_level() -> int:
    try:
        return resolve_log_level(CONFIG.LOG_LEVEL)
    except ConfigurationError:
        # Reported by set_log_level when the CLI validates LOG_LEVEL
        return logging.INFO


def configure_logger(name: str = ROOT_LOGGER_NAME, level: Optional[int] = None):
    """Configure and return a logger writing to stdout."""
    logger = logging.getLogger(name)
    log_level = level if level is not None else _configured_level()
    logger.setLevel(log_level)

    # Lambda captures stdout, so one stdout handler per logger
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


def create_logger(component: str):
    """Logger for one component, e.g. pickupnews.NewsAPIClient."""
    logger = configure_logger(f"{ROOT_LOGGER_NAME}.{component}", level=logging.getLogger(ROOT_LOGGER_NAME).level or None)
    logger.propagate = False
    return logger


def set_log_level(level_name: str) -> int:
    """
    Apply a level to every pickupnews logger created so far.

    Raises:
        ConfigurationError: the level name is unknown
    """
    level = resolve_log_level(level_name)
    for name in [ROOT_LOGGER_NAME] + [n for n in logging.root.manager.loggerDict if n.startswith(f"{ROOT_LOGGER_NAME}.")]:
        logging.getLogger(name).setLevel(level)
    return level


logger = configure_logger()

__all__ = ["logger", "configure_logger", "create_logger", "resolve_log_level", "set_log_level"]
