"""Utility module initialization."""

from .logging import LOG_LEVELS, get_logger, resolve_level, setup_logging
from .paths import default_backup_root, format_size
from .timeutil import format_duration, parse_snapshot_timestamp, snapshot_timestamp

__all__ = [
    # logging
    "LOG_LEVELS",
    "get_logger",
    "resolve_level",
    "setup_logging",
    # paths
    "default_backup_root",
    "format_size",
    # timeutil
    "format_duration",
    "parse_snapshot_timestamp",
    "snapshot_timestamp",
]
