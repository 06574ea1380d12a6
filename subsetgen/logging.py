"""Logging setup for subsetgen.

All package loggers hang off the ``subsetgen`` logger, which owns a single
stderr handler. Stdout is reserved for command output (one JSON subset per
line from ``subsetgen enumerate``), so log lines never mix into it.

Library users get INFO-level logging by default. The CLI reconfigures the
handler on every invocation from its ``--verbose``/``--quiet`` flags.
"""

import logging
import sys
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "subsetgen"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> None:
    """Install the package handler once; later calls are ignored.

    Args:
        level: Level for the ``subsetgen`` logger.
        format_string: Format for the handler.
        stream: Destination stream, ``sys.stderr`` when omitted.
    """
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(format_string))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    # pytest's caplog listens on the root logger
    root_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for module ``name`` under the package root."""
    setup_root_logger()
    return logging.getLogger(name)


def level_for_flags(verbose: bool, quiet: bool) -> int:
    """Map CLI verbosity flags to a log level; ``verbose`` wins over ``quiet``."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_cli_logging(verbose: bool = False, quiet: bool = False) -> int:
    """Rebuild the package handler for one CLI run.

    The handler is recreated so it writes to the ``sys.stderr`` current at
    invocation time.

    Returns:
        The level that was applied.
    """
    level = level_for_flags(verbose, quiet)
    reset_logging()
    setup_root_logger(level=level)
    return level


def reset_logging() -> None:
    """Drop the package handler and level so the next setup starts fresh."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
