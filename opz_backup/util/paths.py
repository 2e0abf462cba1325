"""Utility functions for path operations."""

from pathlib import Path


def default_backup_root() -> Path:
    """Return ``~/opz-backups``, or ``./opz-backups`` when there is no home."""
    try:
        home = Path.home()
    except RuntimeError:
        home = Path(".")
    return home / "opz-backups"


SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_size(size_bytes: int) -> str:
    """Format a byte count with 1024-based units, e.g. ``31.0 MB``."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    
    size = float(size_bytes)
    unit = 0
    while size >= 1024 and unit < len(SIZE_UNITS) - 1:
        size /= 1024
        unit += 1
    
    return f"{size:.1f} {SIZE_UNITS[unit]}"
