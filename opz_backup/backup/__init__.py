"""Backup module initialization."""

from .copier import CopyOperationError, CopyOptions, TransferEvent, TransitResult, copy_directory
from .orchestrator import (
    BackupOrchestrator,
    BackupOutcome,
    CommandError,
    CopyError,
    DestinationError,
    DeviceNotFound,
    Success,
)
from .progress import CopyProgressState, CopyProgressTracker, create_copy_progress_bar, truncate_label
from .storage import BackupStorage, DirectoryCreationError

__all__ = [
    # copier
    "CopyOperationError",
    "CopyOptions",
    "TransferEvent",
    "TransitResult",
    "copy_directory",
    # progress
    "CopyProgressState",
    "CopyProgressTracker",
    "create_copy_progress_bar",
    "truncate_label",
    # storage
    "BackupStorage",
    "DirectoryCreationError",
    # orchestrator
    "BackupOrchestrator",
    "BackupOutcome",
    "CommandError",
    "CopyError",
    "DestinationError",
    "DeviceNotFound",
    "Success",
]
