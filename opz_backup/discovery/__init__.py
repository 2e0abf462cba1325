"""Device discovery module initialization."""

from .command import (
    CommandExecutionError,
    CommandNotFoundError,
    DiskListingError,
    InvalidOutputError,
    run_disk_listing,
)
from .locator import DeviceDiscovery, Found, NotFound, locate_device
from .mounts import MountPoint, extract_device_name, parse_mount_table
from .platform import Platform, detect_platform, listing_command

__all__ = [
    # platform
    "Platform",
    "detect_platform",
    "listing_command",
    # command
    "CommandExecutionError",
    "CommandNotFoundError",
    "DiskListingError",
    "InvalidOutputError",
    "run_disk_listing",
    # mounts
    "MountPoint",
    "extract_device_name",
    "parse_mount_table",
    # locator
    "DeviceDiscovery",
    "Found",
    "NotFound",
    "locate_device",
]
