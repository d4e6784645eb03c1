"""Centralized logging configuration for tripgraph."""

import logging
import sys
from typing import Optional

# Flag to track if we've already set up the package logger
_ROOT_LOGGER_CONFIGURED = False

ROOT_LOGGER_NAME = "tripgraph"


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Set up the ``tripgraph`` logger with a single handler.

    Calling it again after the first successful setup does nothing.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)

    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)

    # Let records reach the Python root logger so pytest can capture them
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits the ``tripgraph`` configuration.

    Args:
        name: Logger name (typically ``__name__`` of the calling module).

    Returns:
        Logger instance with level NOTSET, so the package level applies.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the log level for all tripgraph loggers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def configure_cli_logging(
    verbose: bool = False, quiet: bool = False, machine_output: bool = False
) -> int:
    """Pick and apply the package log level for one CLI invocation.

    Log records share stdout with command output, so machine-readable output
    (e.g. ``run --json``) raises the level to WARNING unless ``verbose`` asks
    for debug records explicitly.

    Args:
        verbose: Emit DEBUG records (query arguments and results).
        quiet: Only emit warnings and errors.
        machine_output: Stdout must carry nothing but the command's payload.

    Returns:
        The level that was applied.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet or machine_output:
        level = logging.WARNING
    else:
        level = logging.INFO
    set_global_log_level(level)
    return level


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Disable debug logging, set to INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Reset logging configuration (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
