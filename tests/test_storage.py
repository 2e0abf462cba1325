"""Tests for backup storage layout."""

import tempfile
from datetime import datetime
from pathlib import Path

import pytest

from opz_backup.backup.storage import BackupStorage, DirectoryCreationError


class TestBackupStorage:
    """Test snapshot paths and destination preparation."""
    
    def test_construction_creates_nothing(self):
        """Test the backup root is not created up front."""
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir) / "opz-backups"
            BackupStorage(root)
            
            assert not root.exists()
    
    def test_snapshot_path(self):
        """Test snapshot directories are named by local timestamp."""
        storage = BackupStorage(Path("/backups"))
        
        path = storage.snapshot_path(datetime(2024, 3, 9, 7, 5, 1))
        
        assert path == Path("/backups/2024-03-09_07-05-01")
    
    def test_prepare_destination_twice(self):
        """Test preparing the same destination again succeeds."""
        with tempfile.TemporaryDirectory() as temp_dir:
            storage = BackupStorage(Path(temp_dir) / "opz-backups")
            destination = storage.snapshot_path(datetime(2024, 3, 9, 7, 5, 1))
            
            assert storage.prepare_destination(destination) == destination
            assert storage.prepare_destination(destination) == destination
            assert destination.is_dir()
    
    def test_prepare_destination_blocked(self):
        """Test a file in the way is a directory creation error."""
        with tempfile.TemporaryDirectory() as temp_dir:
            blocker = Path(temp_dir) / "opz-backups"
            blocker.write_text("not a directory")
            storage = BackupStorage(blocker)
            
            with pytest.raises(DirectoryCreationError):
                storage.prepare_destination(storage.snapshot_path())
    
    def test_list_snapshots(self):
        """Test snapshots are listed newest first, ignoring other entries."""
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            for name in ("2024-01-01_10-00-00", "2024-05-01_09-30-00", "notes", "2023-12-31_23-59-59"):
                (root / name).mkdir()
            (root / "2025-01-01_00-00-00").write_text("a file, not a snapshot")
            
            storage = BackupStorage(root)
            
            assert [p.name for p in storage.list_snapshots()] == [
                "2024-05-01_09-30-00",
                "2024-01-01_10-00-00",
                "2023-12-31_23-59-59",
            ]
            assert storage.get_latest_snapshot().name == "2024-05-01_09-30-00"
    
    def test_list_snapshots_missing_root(self):
        """Test a missing backup root has no snapshots."""
        storage = BackupStorage(Path("/nonexistent/opz-backups"))
        
        assert storage.list_snapshots() == []
        assert storage.get_latest_snapshot() is None
    
    def test_snapshot_size(self):
        """Test snapshot size sums nested files."""
        with tempfile.TemporaryDirectory() as temp_dir:
            snapshot = Path(temp_dir) / "2024-01-01_10-00-00"
            (snapshot / "tape").mkdir(parents=True)
            (snapshot / "tape" / "a.aif").write_bytes(b"x" * 10)
            (snapshot / "b.aif").write_bytes(b"y" * 5)
            
            assert BackupStorage(Path(temp_dir)).get_snapshot_size(snapshot) == 15
