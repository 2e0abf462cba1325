"""Selection of the target device among mount points."""

from dataclasses import dataclass
from typing import Iterable, Union

from .mounts import MountPoint


@dataclass(frozen=True)
class NotFound:
    """No mount point matched the pattern."""


@dataclass(frozen=True)
class Found:
    """The first mount point that matched the pattern."""
    
    mount_point: MountPoint


DeviceDiscovery = Union[NotFound, Found]


def locate_device(mounts: Iterable[MountPoint], pattern: str) -> DeviceDiscovery:
    """Find the first mount whose device name contains ``pattern``.
    
    Matching is case-sensitive and keeps the listing order.
    """
    for mount in mounts:
        if pattern in mount.device_name:
            return Found(mount)
    return NotFound()
