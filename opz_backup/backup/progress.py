"""Progress tracking for a running copy."""

from dataclasses import dataclass
from typing import Optional

from tqdm import tqdm

from .copier import TransferEvent, TransitResult

ELLIPSIS = "..."


@dataclass
class CopyProgressState:
    """Mutable progress of a single copy."""
    
    total_bytes: int = 0
    copied_bytes: int = 0
    current_file: str = ""
    last_reported_percent: int = 0


def compute_percent(copied_bytes: int, total_bytes: int) -> int:
    """Whole percent copied, 0 for an empty source and at most 100."""
    if total_bytes == 0:
        return 0
    return min(copied_bytes * 100 // total_bytes, 100)


def truncate_label(name: str, width: int = 50) -> str:
    """Keep the tail of ``name`` so it fits in ``width`` characters."""
    if len(name) <= width:
        return name
    if width <= len(ELLIPSIS):
        return name[-width:] if width > 0 else ""
    return ELLIPSIS + name[-(width - len(ELLIPSIS)):]


def create_copy_progress_bar(desc: str = "Copying") -> tqdm:
    """Create a percentage progress bar for a copy."""
    return tqdm(
        total=100,
        desc=desc,
        unit="%",
        bar_format="{l_bar}{bar}| {n_fmt}% [{elapsed}<{remaining}]{postfix}"
    )


class CopyProgressTracker:
    """Turns transfer events into a monotonic percentage bar.
    
    The bar only ever advances: repeated or lower percentages are not
    reported again. Used directly as the copy engine's progress handler.
    """
    
    def __init__(self, bar: Optional[tqdm] = None, label_width: int = 50) -> None:
        """Initialize tracker.
        
        Args:
            bar: Progress bar with ``total=100`` (a new one is created if None)
            label_width: Maximum width of the current-file label
        """
        self.bar = bar if bar is not None else create_copy_progress_bar()
        self.label_width = label_width
        self.state = CopyProgressState()
    
    def update(self, event: TransferEvent) -> int:
        """Record an event and return how many points the bar advanced."""
        state = self.state
        state.total_bytes = event.total_bytes
        state.copied_bytes = event.copied_bytes
        
        percent = compute_percent(event.copied_bytes, event.total_bytes)
        increment = 0
        if percent > state.last_reported_percent:
            increment = percent - state.last_reported_percent
            self.bar.update(increment)
            state.last_reported_percent = percent
        
        state.current_file = truncate_label(event.file_name, self.label_width)
        self.bar.set_postfix_str(state.current_file)
        return increment
    
    def __call__(self, event: TransferEvent) -> TransitResult:
        self.update(event)
        return TransitResult.CONTINUE
    
    def finish(self) -> int:
        """Close the bar and return the last reported byte count."""
        self.bar.close()
        return self.state.copied_bytes
