"""Backup storage layout management."""

import typing as t
from datetime import datetime
from pathlib import Path

from ..util.timeutil import parse_snapshot_timestamp, snapshot_timestamp


class DirectoryCreationError(Exception):
    """Backup destination could not be created."""
    pass


class BackupStorage:
    """Manages the backup root and its timestamped snapshots."""
    
    def __init__(self, base_path: Path) -> None:
        """Initialize backup storage.
        
        Nothing is created on disk until a destination is prepared.
        
        Args:
            base_path: Base directory for all snapshots
        """
        self.base_path = Path(base_path)
    
    def snapshot_path(self, timestamp: t.Optional[datetime] = None) -> Path:
        """Get the snapshot directory for a moment in local time.
        
        Args:
            timestamp: Backup timestamp (uses current time if None)
            
        Returns:
            Path to the snapshot directory
        """
        return self.base_path / snapshot_timestamp(timestamp)
    
    def prepare_destination(self, path: Path) -> Path:
        """Create a destination directory; existing directories are fine.
        
        Args:
            path: Directory to create
            
        Returns:
            The prepared directory
            
        Raises:
            DirectoryCreationError: If the directory cannot be created
        """
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(f"Could not create {path}: {e}") from e
        return path
    
    def list_snapshots(self) -> t.List[Path]:
        """List snapshot directories, newest first.
        
        Returns:
            Snapshot directories whose names are backup timestamps
        """
        if not self.base_path.is_dir():
            return []
        
        snapshots = [
            d for d in self.base_path.iterdir()
            if d.is_dir() and parse_snapshot_timestamp(d.name) is not None
        ]
        
        return sorted(snapshots, key=lambda d: d.name, reverse=True)
    
    def get_latest_snapshot(self) -> t.Optional[Path]:
        """Get the most recent snapshot, or None if there is none."""
        snapshots = self.list_snapshots()
        return snapshots[0] if snapshots else None
    
    def get_snapshot_size(self, snapshot: Path) -> int:
        """Total size in bytes of the files in a snapshot."""
        return sum(f.stat().st_size for f in snapshot.rglob("*") if f.is_file())
