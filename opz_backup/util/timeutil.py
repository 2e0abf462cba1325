"""Utility functions for time operations."""

from datetime import datetime
from typing import Optional

SNAPSHOT_FORMAT = "%Y-%m-%d_%H-%M-%S"


def snapshot_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a local timestamp for a backup snapshot directory name."""
    if moment is None:
        moment = datetime.now()
    return moment.strftime(SNAPSHOT_FORMAT)


def parse_snapshot_timestamp(name: str) -> Optional[datetime]:
    """Parse a snapshot directory name back into a datetime, if it is one."""
    try:
        return datetime.strptime(name, SNAPSHOT_FORMAT)
    except ValueError:
        return None


def format_duration(seconds: float) -> str:
    """Format a copy duration as ``4.2s``, ``3m 07s`` or ``1h 02m``."""
    if seconds < 60:
        return f"{seconds:.1f}s"
    
    minutes, secs = divmod(int(seconds), 60)
    if minutes < 60:
        return f"{minutes}m {secs:02d}s"
    
    hours, minutes = divmod(minutes, 60)
    return f"{hours}h {minutes:02d}m"
