"""
Logging infrastructure.

Provides logging utilities shared by the domain, orchestration and demo
packages. Each package has one top-level logger carrying the stream
handler and the level; module loggers below it only propagate.
"""
import logging
from typing import Union

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Top-level loggers that own the handler and level
PACKAGE_LOGGERS = ("core", "orchestration", "demo")


def _install_handler(logger: logging.Logger) -> None:
    """Attach the standard stream handler once; default the level to INFO."""
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(LOG_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.

    Loggers inside a package inherit the package logger's handler and
    level; any other name gets its own handler.

    Args:
        name: Logger name (usually module name)

    Returns:
        Logger instance
    """
    package = name.split(".")[0]
    if package in PACKAGE_LOGGERS:
        _install_handler(logging.getLogger(package))
        return logging.getLogger(name)

    logger = logging.getLogger(name)
    _install_handler(logger)
    return logger


def configure_logging(level: Union[str, int] = logging.INFO) -> int:
    """
    Apply a log level to the package loggers.

    Module loggers created before or after this call follow it, since they
    inherit from their package logger.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level

    Returns:
        The numeric level applied

    Raises:
        ValueError: If the level name is unknown
    """
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level}")
        level = numeric

    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        _install_handler(logger)
        logger.setLevel(level)
    return level
