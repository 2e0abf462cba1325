"""Backup run orchestration."""

import time
import typing as t
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from rich.console import Console

from ..config import BackupSettings
from ..discovery import (
    CommandNotFoundError,
    DiskListingError,
    Found,
    MountPoint,
    Platform,
    detect_platform,
    listing_command,
    locate_device,
    parse_mount_table,
    run_disk_listing,
)
from ..util.logging import get_logger
from ..util.timeutil import format_duration
from .copier import CopyOperationError, CopyOptions, ProgressHandler, copy_directory
from .progress import CopyProgressTracker, create_copy_progress_bar
from .storage import BackupStorage, DirectoryCreationError

logger = get_logger(__name__)


@dataclass(frozen=True)
class Success:
    """The device contents were copied."""

    bytes_copied: int
    destination: Path


@dataclass(frozen=True)
class DeviceNotFound:
    """No mounted volume matched the device pattern."""

    pattern: str


@dataclass(frozen=True)
class CommandError:
    """The disk-listing command failed or produced unusable output."""

    message: str


@dataclass(frozen=True)
class DestinationError:
    """The snapshot directory could not be created."""

    message: str


@dataclass(frozen=True)
class CopyError:
    """The copy failed part way; the destination may be partially filled."""

    message: str
    destination: Path


BackupOutcome = t.Union[Success, DeviceNotFound, CommandError, DestinationError, CopyError]

CopyEngine = t.Callable[[Path, Path, CopyOptions, ProgressHandler], int]


class BackupOrchestrator:
    """Runs one backup from device discovery to the finished copy.

    Every stage runs once, in order, and any failure ends the run with the
    matching outcome. Nothing is retried or rolled back.
    """

    def __init__(
        self,
        settings: BackupSettings,
        console: t.Optional[Console] = None,
        platform: t.Optional[Platform] = None,
        list_mounts: t.Callable[[t.List[str]], str] = run_disk_listing,
        copy_engine: CopyEngine = copy_directory,
        progress_bar_factory: t.Callable[[], t.Any] = create_copy_progress_bar,
        clock: t.Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize orchestrator.

        Args:
            settings: Backup settings for this run
            console: Console for user-facing messages
            platform: Platform to use instead of detecting the host
            list_mounts: Runs a disk-listing command and returns its output
            copy_engine: Recursive copy with a progress handler
            progress_bar_factory: Creates the bar driven by the tracker
            clock: Source of the snapshot timestamp
        """
        self.settings = settings
        self.console = console if console is not None else Console()
        self.platform = platform
        self.list_mounts = list_mounts
        self.copy_engine = copy_engine
        self.progress_bar_factory = progress_bar_factory
        self.clock = clock
        self.storage = BackupStorage(settings.backup_root)

    def discover_mounts(self) -> t.List[MountPoint]:
        """Detect the platform, run its disk listing and parse the result.

        Raises:
            DiskListingError: If the listing command fails
        """
        platform = self.platform if self.platform is not None else detect_platform()
        command = listing_command(platform)
        try:
            output = self.list_mounts(command)
        except CommandNotFoundError:
            if platform is not Platform.WINDOWS:
                raise
            # wmic is missing on recent Windows releases
            logger.warning(f"{command[0]} is not available, no Windows volumes can be listed")
            output = ""
        return parse_mount_table(output, platform)

    def run(self) -> BackupOutcome:
        """Execute the backup and return its outcome."""
        pattern = self.settings.device_pattern
        self.console.print(f"Looking for {pattern}...")

        try:
            mounts = self.discover_mounts()
        except DiskListingError as e:
            logger.error(f"Disk listing failed: {e}")
            return CommandError(str(e))

        discovery = locate_device(mounts, pattern)
        if not isinstance(discovery, Found):
            logger.info(f"No mount point matches {pattern!r} among {len(mounts)} candidates")
            return DeviceNotFound(pattern)

        source = discovery.mount_point
        logger.info(f"Found {source.device_name} at {source.path}")
        self.console.print(f"Found {source.device_name} at {source.path}")

        destination = self.storage.snapshot_path(self.clock())
        self.console.print(f"→ {destination}")

        try:
            self.storage.prepare_destination(destination)
        except DirectoryCreationError as e:
            logger.error(str(e))
            return DestinationError(str(e))

        return self._copy(Path(source.path), destination)

    def _copy(self, source: Path, destination: Path) -> BackupOutcome:
        options = CopyOptions(content_only=True, buffer_size=self.settings.buffer_size)
        tracker = CopyProgressTracker(self.progress_bar_factory(), self.settings.label_width)

        started = time.monotonic()
        try:
            self.copy_engine(source, destination, options, tracker)
        except CopyOperationError as e:
            tracker.finish()
            logger.error(f"Copy to {destination} failed: {e}")
            return CopyError(str(e), destination)

        bytes_copied = tracker.finish()
        logger.info(f"Copied {bytes_copied} bytes in {format_duration(time.monotonic() - started)}")
        return Success(bytes_copied, destination)
