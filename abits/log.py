import logging
import sys
from typing import Optional

LOGGER_NAME = "abits"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"

_handler: Optional[logging.Handler] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Returns a logger under the abits namespace."""
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level=None, config_path=None) -> logging.Logger:
    """
    Attaches a stdout handler to the abits logger.

    Safe to call more than once; the handler is only added the first time and
    later calls just change the level. With no level given, the level comes
    from the config file.
    """
    global _handler

    if level is None:
        from .config_loader import load_config
        level = load_config(config_path)["logging"]["level"]
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    logger = get_logger()
    logger.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(_handler)
    _handler.setLevel(level)
    return logger
