"""Tests for device location."""

from opz_backup.discovery.locator import Found, NotFound, locate_device
from opz_backup.discovery.mounts import MountPoint, parse_mount_table
from opz_backup.discovery.platform import Platform


class TestLocateDevice:
    """Test selecting the device among mount points."""
    
    def test_first_match_wins(self):
        """Test the first matching mount in listing order is chosen."""
        mounts = [
            MountPoint("/a", "Foo"),
            MountPoint("/b", "OP-Z-1"),
            MountPoint("/c", "OP-Z-2"),
        ]
        
        discovery = locate_device(mounts, "OP-Z")
        
        assert isinstance(discovery, Found)
        assert discovery.mount_point.device_name == "OP-Z-1"
    
    def test_not_found(self):
        """Test no match yields NotFound."""
        mounts = [MountPoint("/a", "Foo")]
        
        assert locate_device(mounts, "OP-Z") == NotFound()
        assert locate_device([], "OP-Z") == NotFound()
    
    def test_case_sensitive(self):
        """Test matching does not ignore case."""
        mounts = [MountPoint("/media/op-z", "op-z")]
        
        assert isinstance(locate_device(mounts, "OP-Z"), NotFound)
    
    def test_matches_device_name_not_path(self):
        """Test the pattern is checked against the device name only."""
        mounts = [MountPoint("/media/OP-Z/disk", "disk")]
        
        assert isinstance(locate_device(mounts, "OP-Z"), NotFound)
    
    def test_linux_listing_end_to_end(self):
        """Test a Linux listing with one OP-Z row is found."""
        output = (
            "Filesystem      Size  Used Avail Use% Mounted on\n"
            "/dev/sdb1        31M   12M   19M  39% /media/OP-Z\n"
        )
        
        discovery = locate_device(parse_mount_table(output, Platform.LINUX), "OP-Z")
        
        assert discovery == Found(MountPoint(path="/media/OP-Z", device_name="OP-Z"))
