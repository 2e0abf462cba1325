"""Tests for the recursive copy engine."""

import tempfile
from pathlib import Path

import pytest

from opz_backup.backup.copier import (
    CopyOperationError,
    CopyOptions,
    TransferEvent,
    TransitResult,
    copy_directory,
)


class EventRecorder:
    """Progress handler that records every event."""
    
    def __init__(self, result=TransitResult.CONTINUE):
        self.events = []
        self.result = result
    
    def __call__(self, event: TransferEvent) -> TransitResult:
        self.events.append(event)
        return self.result


def build_source(root: Path) -> Path:
    """Create a small device-like tree."""
    source = root / "OP-Z"
    (source / "tape").mkdir(parents=True)
    (source / "sample packs" / "1-kick").mkdir(parents=True)
    (source / "empty-dir").mkdir()
    (source / "tape" / "track01.aif").write_bytes(b"a" * 100)
    (source / "sample packs" / "1-kick" / "kick.aif").write_bytes(b"b" * 250)
    (source / "readme.txt").write_bytes(b"")
    return source


class TestCopyDirectory:
    """Test copying a directory tree with transfer events."""
    
    def test_copies_contents_only(self):
        """Test the source's contents land directly in the destination."""
        with tempfile.TemporaryDirectory() as temp_dir:
            source = build_source(Path(temp_dir))
            destination = Path(temp_dir) / "backup"
            
            copied = copy_directory(source, destination, CopyOptions(), EventRecorder())
            
            assert copied == 350
            assert (destination / "tape" / "track01.aif").read_bytes() == b"a" * 100
            assert (destination / "sample packs" / "1-kick" / "kick.aif").read_bytes() == b"b" * 250
            assert (destination / "readme.txt").read_bytes() == b""
            assert (destination / "empty-dir").is_dir()
            assert not (destination / "OP-Z").exists()
    
    def test_copies_directory_itself(self):
        """Test content_only=False nests the source directory."""
        with tempfile.TemporaryDirectory() as temp_dir:
            source = build_source(Path(temp_dir))
            destination = Path(temp_dir) / "backup"
            
            copy_directory(source, destination, CopyOptions(content_only=False), EventRecorder())
            
            assert (destination / "OP-Z" / "tape" / "track01.aif").exists()
    
    def test_events_are_cumulative(self):
        """Test events report a fixed total and a growing byte count."""
        with tempfile.TemporaryDirectory() as temp_dir:
            source = build_source(Path(temp_dir))
            recorder = EventRecorder()
            
            copy_directory(source, Path(temp_dir) / "backup", CopyOptions(buffer_size=64), recorder)
            
            events = recorder.events
            assert all(e.total_bytes == 350 for e in events)
            copied = [e.copied_bytes for e in events]
            assert copied == sorted(copied)
            assert copied[-1] == 350
            # 100 bytes in 2 chunks, 250 in 4 chunks, one event for the empty file
            assert len(events) == 7
    
    def test_file_names_are_relative(self):
        """Test events name files relative to the source root."""
        with tempfile.TemporaryDirectory() as temp_dir:
            source = build_source(Path(temp_dir))
            recorder = EventRecorder()
            
            copy_directory(source, Path(temp_dir) / "backup", CopyOptions(), recorder)
            
            names = {e.file_name for e in recorder.events}
            assert names == {"readme.txt", "tape/track01.aif", "sample packs/1-kick/kick.aif"}
    
    def test_empty_source(self):
        """Test an empty source copies nothing and emits no events."""
        with tempfile.TemporaryDirectory() as temp_dir:
            source = Path(temp_dir) / "OP-Z"
            source.mkdir()
            recorder = EventRecorder()
            
            assert copy_directory(source, Path(temp_dir) / "backup", CopyOptions(), recorder) == 0
            assert recorder.events == []
    
    def test_missing_source(self):
        """Test a vanished source is a copy error."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with pytest.raises(CopyOperationError, match="does not exist"):
                copy_directory(Path(temp_dir) / "gone", Path(temp_dir) / "backup", CopyOptions(), EventRecorder())
    
    def test_abort(self):
        """Test an abort from the handler stops the copy."""
        with tempfile.TemporaryDirectory() as temp_dir:
            source = build_source(Path(temp_dir))
            recorder = EventRecorder(result=TransitResult.ABORT)
            
            with pytest.raises(CopyOperationError, match="aborted"):
                copy_directory(source, Path(temp_dir) / "backup", CopyOptions(), recorder)
            
            assert len(recorder.events) == 1
    
    def test_existing_target_file(self):
        """Test existing files are only replaced with overwrite."""
        with tempfile.TemporaryDirectory() as temp_dir:
            source = build_source(Path(temp_dir))
            destination = Path(temp_dir) / "backup"
            destination.mkdir()
            (destination / "readme.txt").write_bytes(b"old")
            
            with pytest.raises(CopyOperationError, match="already exists"):
                copy_directory(source, destination, CopyOptions(), EventRecorder())
            
            copy_directory(source, destination, CopyOptions(overwrite=True), EventRecorder())
            assert (destination / "readme.txt").read_bytes() == b""
