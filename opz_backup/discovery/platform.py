"""Host platform detection and disk-listing command selection."""

import platform as _platform
from enum import Enum
from typing import Dict, List, Optional

from ..util.logging import get_logger

logger = get_logger(__name__)


class Platform(str, Enum):
    """Platforms with a known disk-listing strategy."""
    
    MACOS = "macos"
    LINUX = "linux"
    WINDOWS = "windows"


_SYSTEM_NAMES = {
    "Darwin": Platform.MACOS,
    "Linux": Platform.LINUX,
    "Windows": Platform.WINDOWS,
}

LISTING_COMMANDS: Dict[Platform, List[str]] = {
    Platform.MACOS: ["df", "-h"],
    Platform.LINUX: ["df", "-h"],
    Platform.WINDOWS: ["wmic", "logicaldisk", "get", "DeviceID,VolumeName"],
}


def detect_platform(system: Optional[str] = None) -> Platform:
    """Resolve the host platform.
    
    Unrecognised systems get the Linux strategy rather than an error, so the
    parse may silently find nothing on them.
    """
    if system is None:
        system = _platform.system()
    
    detected = _SYSTEM_NAMES.get(system)
    if detected is None:
        logger.warning(f"Unrecognised platform {system!r}, falling back to Linux parsing")
        return Platform.LINUX
    
    logger.debug(f"Detected platform: {detected.value}")
    return detected


def listing_command(platform: Platform) -> List[str]:
    """Get the disk-listing command for a platform."""
    return list(LISTING_COMMANDS[platform])
