"""
Logging for pybundle.

Console-style logging: bare message lines on stdout. Only the package logger
("pybundle") owns a handler; module loggers ("pybundle.download", ...) propagate
to it, so ``setup_logging(verbose=False)`` quiets the whole package at once.
"""

import logging
import sys
from typing import Optional

DEFAULT_LOGGER_NAME = "pybundle"


def _configure(logger: logging.Logger) -> None:
    # Only configure once (avoid duplicate handlers)
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    # Prevent propagation to root logger
    logger.propagate = False


def _set_verbose(logger: logging.Logger, verbose: bool) -> None:
    level = logging.INFO if verbose else logging.WARNING
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def get_logger(name: Optional[str] = None, verbose: Optional[bool] = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (default: "pybundle"). Names under "pybundle."
            share the package handler.
        verbose: When given, INFO (True) or WARNING (False) for the package
            logger; None leaves the current level alone.

    Returns:
        Logger instance
    """
    package_logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    _configure(package_logger)
    if verbose is not None:
        _set_verbose(package_logger, verbose)
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)


def setup_logging(verbose: bool = True) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        verbose: INFO and above when True, WARNING and above otherwise

    Returns:
        The package logger
    """
    return get_logger(verbose=verbose)
