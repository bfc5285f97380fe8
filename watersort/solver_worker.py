"""
Solver Worker Module for the Water Sort Solver

Runs a single solve on a background QThread so the UI stays responsive.
Communicates with the UI via Qt signals for thread-safe status updates.
"""

import logging
import threading
from typing import List, Optional

from PyQt5.QtCore import QThread, pyqtSignal

from watersort.solver import MAX_STATES, Solution, solve_puzzle


# Configure module logger
logger = logging.getLogger(__name__)


class SolverWorker(QThread):
    """
    Background worker thread for one solve.

    The search itself never yields; stopping is done by setting the
    cancel event, which the search polls once per expanded state.

    Signals:
        status_changed(str): Emitted when worker status changes
        progress_changed(float, str): Search progress (0.0-1.0, message)
        solution_ready(object): Emitted with the finished Solution
        error_occurred(str): Emitted when the solve raises

    Example:
        worker = SolverWorker(vials, strict_mode=True)
        worker.solution_ready.connect(ui.show_solution)
        worker.start()
        # ...
        worker.request_stop()
        worker.wait()
    """

    status_changed = pyqtSignal(str)
    progress_changed = pyqtSignal(float, str)
    solution_ready = pyqtSignal(object)
    error_occurred = pyqtSignal(str)

    def __init__(self, vials: List[List[str]], strict_mode: bool = True,
                 max_states: int = MAX_STATES):
        """
        Initialize the solver worker.

        Args:
            vials: Puzzle vials, bottom to top
            strict_mode: Strict or loose goal
            max_states: Search expansion budget
        """
        super().__init__()
        self.vials = vials
        self.strict_mode = strict_mode
        self.max_states = max_states
        self._cancel_flag = threading.Event()
        self._solution: Optional[Solution] = None

    def run(self):
        """
        Worker entry point. Called when thread starts.

        Runs the solve to completion, cancellation or budget exhaustion
        and emits the result.
        """
        logger.info(
            f"Solver worker started: {len(self.vials)} vials, "
            f"strict={self.strict_mode}, max_states={self.max_states}"
        )
        self.status_changed.emit("Solving...")

        try:
            solution = solve_puzzle(
                self.vials,
                strict_mode=self.strict_mode,
                max_states=self.max_states,
                cancel_flag=self._cancel_flag,
                progress_callback=self._on_progress,
            )
        except Exception as e:
            logger.exception("Error in solver worker")
            self.error_occurred.emit(str(e))
            return

        self._solution = solution
        if solution.success:
            self.status_changed.emit(f"Solved in {solution.move_count} moves")
        else:
            self.status_changed.emit(solution.message)
        self.solution_ready.emit(solution)
        logger.info(f"Solver worker finished: {solution.status.value}")

    def _on_progress(self, fraction: float, message: str) -> None:
        self.progress_changed.emit(fraction, message)

    def request_stop(self):
        """
        Request the worker to stop.

        The search returns a CANCELLED solution at its next expansion.
        Use wait() after calling this to block until stopped.
        """
        logger.info("Stop requested")
        self._cancel_flag.set()

    @property
    def solution(self) -> Optional[Solution]:
        """Last finished solution, None while running."""
        return self._solution
