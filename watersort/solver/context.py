"""
Solution Context Module - Inputs and host controls for a single solve.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .goal import GoalMode
from .state import VialState


# Default exploration budget (number of dequeued search nodes)
MAX_STATES = 1_000_000


@dataclass
class SolutionContext:
    """
    Context passed to strategies containing the puzzle, goal mode,
    search budget, cancellation, and progress reporting.

    Attributes:
        state: Initial vial configuration
        mode: Goal condition to search for
        max_states: Maximum number of nodes the search may expand
        cancel_flag: Threading event set by the host to abandon the search
        timeout_sec: Optional wall-clock limit; None means no limit
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    state: VialState
    mode: GoalMode = GoalMode.STRICT
    max_states: int = MAX_STATES
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
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
        if self.timeout_sec is not None and self.elapsed_time() > self.timeout_sec:
            return True
        return False

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the host.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def elapsed_time(self) -> float:
        """Seconds elapsed since computation started."""
        return time.time() - self.start_time
