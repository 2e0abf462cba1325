"""Disk-listing command execution."""

import subprocess
from typing import List

from ..util.logging import get_logger

logger = get_logger(__name__)


class DiskListingError(Exception):
    """Disk-listing command could not produce usable output."""
    pass


class CommandExecutionError(DiskListingError):
    """Command could not be run or exited with a failure status."""
    pass


class CommandNotFoundError(CommandExecutionError):
    """Command executable is not installed."""
    pass


class InvalidOutputError(DiskListingError):
    """Command output was not valid UTF-8."""
    pass


def run_disk_listing(command: List[str]) -> str:
    """Run a disk-listing command and return its decoded standard output.
    
    Args:
        command: Executable and arguments
        
    Returns:
        Standard output as text
        
    Raises:
        CommandExecutionError: If the command cannot run or exits non-zero
        InvalidOutputError: If standard output is not UTF-8
    """
    cmd_line = " ".join(command)
    logger.debug(f"Running disk listing: {cmd_line}")
    
    try:
        result = subprocess.run(command, capture_output=True, check=True)
    except FileNotFoundError as e:
        raise CommandNotFoundError(f"Command not found: {command[0]}") from e
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
        error_msg = f"Command failed with exit status {e.returncode}: {cmd_line}"
        if stderr:
            error_msg += f"\nError: {stderr}"
        raise CommandExecutionError(error_msg) from e
    except OSError as e:
        raise CommandExecutionError(f"Could not run {cmd_line}: {e}") from e
    
    try:
        return result.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidOutputError(f"Output of {cmd_line} is not valid UTF-8: {e}") from e
