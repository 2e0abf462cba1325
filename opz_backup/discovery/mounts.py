"""Mount table parsing for disk-usage listings."""

from dataclasses import dataclass
from typing import Callable, Dict, List

from .platform import Platform
from ..util.logging import get_logger

logger = get_logger(__name__)

UNKNOWN_DEVICE = "Unknown"

MACOS_MOUNT_COLUMN = 8
LINUX_MOUNT_COLUMN = 5
LINUX_MOUNT_PREFIXES = ("/media/", "/mnt/")


@dataclass(frozen=True)
class MountPoint:
    """A mounted volume that may hold the device."""
    
    path: str
    device_name: str
    
    @classmethod
    def from_path(cls, path: str) -> "MountPoint":
        return cls(path=path, device_name=extract_device_name(path))


def extract_device_name(path: str) -> str:
    """Get the last ``/`` segment of a mount path, or ``"Unknown"``."""
    name = path.rsplit("/", 1)[-1]
    return name or UNKNOWN_DEVICE


def _data_rows(output: str) -> List[List[str]]:
    # First line is the column header
    return [line.split() for line in output.splitlines()[1:]]


def parse_macos(output: str) -> List[MountPoint]:
    """Parse macOS ``df -h`` output; mounts live in column 9 under /Volumes."""
    mounts = []
    
    for parts in _data_rows(output):
        if len(parts) <= MACOS_MOUNT_COLUMN:
            continue
        
        path = parts[MACOS_MOUNT_COLUMN]
        if "Volume" in path:
            mounts.append(MountPoint.from_path(path))
        else:
            logger.debug(f"Skipping non-volume mount: {path}")
    
    return mounts


def parse_linux(output: str) -> List[MountPoint]:
    """Parse Linux ``df -h`` output; mounts live in column 6."""
    mounts = []
    
    for parts in _data_rows(output):
        if len(parts) <= LINUX_MOUNT_COLUMN:
            continue
        
        path = parts[LINUX_MOUNT_COLUMN]
        if path.startswith(LINUX_MOUNT_PREFIXES):
            mounts.append(MountPoint.from_path(path))
        else:
            logger.debug(f"Skipping non-removable mount: {path}")
    
    return mounts


def parse_windows(output: str) -> List[MountPoint]:
    """Windows volumes are not matched yet; always returns no candidates."""
    logger.warning("Mount detection is not implemented on Windows")
    return []


MOUNT_PARSERS: Dict[Platform, Callable[[str], List[MountPoint]]] = {
    Platform.MACOS: parse_macos,
    Platform.LINUX: parse_linux,
    Platform.WINDOWS: parse_windows,
}


def parse_mount_table(output: str, platform: Platform) -> List[MountPoint]:
    """Parse raw disk-listing output with the strategy for ``platform``.
    
    Args:
        output: Raw command output, header line first
        platform: Platform the output came from
        
    Returns:
        Candidate mount points in listing order
    """
    mounts = MOUNT_PARSERS[platform](output)
    logger.debug(f"Parsed {len(mounts)} candidate mount points")
    return mounts
