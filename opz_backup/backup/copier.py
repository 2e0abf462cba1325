"""Recursive directory copy with transfer events."""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, List, Tuple, Union

from ..util.logging import get_logger

logger = get_logger(__name__)


class CopyOperationError(Exception):
    """Copy failed or was aborted."""
    pass


class TransitResult(Enum):
    """What a progress handler tells the copy engine to do next."""
    
    CONTINUE = "continue"
    ABORT = "abort"


@dataclass(frozen=True)
class TransferEvent:
    """Cumulative progress of one recursive copy."""
    
    total_bytes: int
    copied_bytes: int
    file_name: str


@dataclass
class CopyOptions:
    """Options for :func:`copy_directory`."""
    
    content_only: bool = True
    buffer_size: int = 64000
    overwrite: bool = False


ProgressHandler = Callable[[TransferEvent], TransitResult]


def _collect_tree(source: Path) -> Tuple[List[Path], List[Path]]:
    """List directories and files under ``source`` in a stable order."""
    dirs = []
    files = []
    
    for root, dirnames, filenames in os.walk(source):
        dirnames.sort()
        root_path = Path(root)
        dirs.extend(root_path / name for name in dirnames)
        files.extend(root_path / name for name in sorted(filenames))
    
    return dirs, files


def copy_directory(
    source: Union[str, Path],
    destination: Union[str, Path],
    options: CopyOptions,
    progress_handler: ProgressHandler
) -> int:
    """Copy a directory tree, reporting every chunk to ``progress_handler``.
    
    Args:
        source: Directory to copy
        destination: Directory to copy into
        options: Copy options
        progress_handler: Called after each chunk and once per empty file
        
    Returns:
        Total number of bytes copied
        
    Raises:
        CopyOperationError: On any I/O failure, an existing target file
            without ``overwrite``, or an abort from the handler
    """
    source = Path(source)
    destination = Path(destination)
    
    if not source.is_dir():
        raise CopyOperationError(f"Source directory does not exist: {source}")
    
    target_root = destination if options.content_only else destination / source.name
    
    try:
        dirs, files = _collect_tree(source)
        total_bytes = sum(f.stat().st_size for f in files)
        logger.debug(f"Copying {len(files)} files ({total_bytes} bytes) from {source}")
        
        target_root.mkdir(parents=True, exist_ok=True)
        for directory in dirs:
            (target_root / directory.relative_to(source)).mkdir(parents=True, exist_ok=True)
        
        copied_bytes = 0
        for file_path in files:
            relative = file_path.relative_to(source)
            target = target_root / relative
            
            if target.exists() and not options.overwrite:
                raise CopyOperationError(f"Target file already exists: {target}")
            
            file_name = relative.as_posix()
            with open(file_path, "rb") as src, open(target, "wb") as dst:
                reported = False
                while chunk := src.read(options.buffer_size):
                    dst.write(chunk)
                    copied_bytes += len(chunk)
                    reported = True
                    _notify(progress_handler, TransferEvent(total_bytes, copied_bytes, file_name))
                
                if not reported:
                    _notify(progress_handler, TransferEvent(total_bytes, copied_bytes, file_name))
    
    except OSError as e:
        raise CopyOperationError(f"Copy failed: {e}") from e
    
    return copied_bytes


def _notify(progress_handler: ProgressHandler, event: TransferEvent) -> None:
    if progress_handler(event) is TransitResult.ABORT:
        raise CopyOperationError(f"Copy aborted at {event.file_name}")
