"""Logging setup for the CLI and library modules."""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "opz_backup"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"


def resolve_level(level: str, verbose: bool = False) -> int:
    """Map a level name to its number; ``verbose`` always means DEBUG.

    Raises:
        ValueError: If ``level`` is not one of ``LOG_LEVELS``
    """
    if verbose:
        return logging.DEBUG

    name = level.upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}")
    return logging.getLevelName(name)


def setup_logging(
    level: str = "INFO",
    verbose: bool = False,
    log_file: Optional[Path] = None,
    console: Optional[Console] = None
) -> logging.Logger:
    """Route ``opz_backup`` logs to a Rich console and optionally a file.

    The console handler follows ``level`` (or DEBUG when ``verbose``); the
    file handler always records DEBUG and above.
    """
    console_level = resolve_level(level, verbose)

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = RichHandler(
        console=console if console is not None else Console(),
        show_time=True,
        show_path=verbose,
        rich_tracebacks=True,
    )
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(console_level)

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
