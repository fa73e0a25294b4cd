"""
Solution Context Module - Shared context for strategy execution.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .board import SolvableArena


@dataclass
class SolutionContext:
    """
    Shared context passed to strategies containing the arena, turn budget,
    cancellation, and progress reporting.

    Attributes:
        board: Arena to solve
        turns: Fixed turn budget, or None to search with growing budgets
        max_turns: Largest budget tried when turns is None
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    board: "SolvableArena"
    turns: Optional[int] = None
    max_turns: int = 100
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: float = 20.0
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[float, str], None]] = None

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if strategy should stop execution
        """
        if self.cancel_flag.is_set():
            return True
        if time.time() - self.start_time > self.timeout_sec:
            return True
        return False

    def cancel(self) -> None:
        """Ask a running search to stop."""
        self.cancel_flag.set()

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def elapsed_time(self) -> float:
        """Seconds elapsed since computation started."""
        return time.time() - self.start_time
