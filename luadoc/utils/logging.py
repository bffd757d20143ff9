"""Logging setup for the Lua documentation generator.

Configures the ``luadoc`` logger that every module logger propagates
to. Level, format and the optional log file come from config.yaml.
"""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "luadoc"


def setup_logging(
    level: str = "INFO",
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the package logger with a console and optional file handler.

    Existing handlers are replaced, so calling this more than once does not
    duplicate output. Console output goes to stderr by default so that it
    never mixes with command output on stdout.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to INFO.
        log_format: Format string for log records.
        log_file: Optional path of a file that receives the same records.
        stream: Console stream. Defaults to sys.stderr.

    Returns:
        The configured ``luadoc`` logger.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    package_logger.setLevel(numeric_level)
    package_logger.propagate = False

    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.debug("Logging initialized at level %s", level)
    return package_logger
