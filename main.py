"""
Water Sort Solver - Entry Point

Launches the desktop window, the HTTP API, or a one-shot solve of a puzzle file.

Example:
    python main.py                          # Desktop UI
    python main.py --serve --port 8080      # HTTP API
    python main.py --solve puzzle.json      # Print solution for a JSON puzzle
"""

import sys
import logging
import argparse
from typing import Optional

from watersort.settings import load_settings, save_settings


logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False):
    """Log to both console and solver.log."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("solver.log", mode='w', encoding='utf-8')  # File output
        ]
    )


class Application:
    """
    Desktop application controller.

    Manages the lifecycle of the window and one solver worker at a time,
    connecting signals between them.
    """

    def __init__(self, settings: dict):
        """
        Initialize the application.

        Args:
            settings: Loaded settings (strict_mode, max_states, ...)
        """
        from watersort.control_ui import ControlWindow
        from watersort.solver_worker import SolverWorker

        self._window_cls = ControlWindow
        self._worker_cls = SolverWorker
        self.settings = settings
        self.window: Optional[ControlWindow] = None
        self.worker: Optional[SolverWorker] = None

    def setup(self):
        """Set up the UI and connect signals."""
        self.window = self._window_cls()

        self.window.solve_requested.connect(self._on_solve)
        self.window.stop_requested.connect(self._on_stop)
        self.window.shutdown_requested.connect(self._on_shutdown)
        self.window.strict_mode_toggled.connect(self._on_strict_mode_toggled)

        self.window.set_strict_mode(self.settings.get("strict_mode", True))
        logger.info(f"Application initialized, max_states={self.settings['max_states']}")

    def _on_solve(self, vials, strict_mode: bool):
        """Handle solve button click."""
        if self.worker and self.worker.isRunning():
            logger.warning("Worker already running")
            return

        logger.info(f"Starting solver worker for {len(vials)} vials")
        self.worker = self._worker_cls(
            vials, strict_mode=strict_mode, max_states=self.settings["max_states"]
        )

        self.worker.status_changed.connect(self.window.set_status)
        self.worker.progress_changed.connect(self.window.set_progress)
        self.worker.solution_ready.connect(self.window.show_solution)
        self.worker.error_occurred.connect(self._on_error)
        self.worker.finished.connect(self._on_finished)

        self.worker.start()
        self.window.set_running(True)

    def _on_stop(self):
        """Handle stop button click."""
        if not self.worker or not self.worker.isRunning():
            logger.warning("Worker not running")
            return

        logger.info("Stopping solver worker")
        self.worker.request_stop()
        self.worker.wait(2000)  # 2 second timeout

        if self.worker.isRunning():
            logger.warning("Worker did not stop gracefully, terminating")
            self.worker.terminate()
            self.worker.wait()

    def _on_finished(self):
        self.window.set_running(False)

    def _on_shutdown(self):
        """Handle window close."""
        logger.info("Shutdown requested")
        if self.worker and self.worker.isRunning():
            self._on_stop()

    def _on_error(self, error_msg: str):
        """Handle worker error."""
        logger.error(f"Worker error: {error_msg}")
        self.window.set_status(f"Error: {error_msg}")

    def _on_strict_mode_toggled(self, strict: bool):
        """Persist strict mode checkbox."""
        logger.info(f"Strict mode toggled: {strict}")
        self.settings["strict_mode"] = strict
        save_settings(self.settings)

    def run(self) -> int:
        self.window.show()
        return 0


def run_gui(settings: dict) -> int:
    """Start the Qt event loop with the control window."""
    from PyQt5.QtWidgets import QApplication

    app = QApplication(sys.argv)

    application = Application(settings)
    application.setup()
    application.run()

    return app.exec_()


def run_server(settings: dict, host: Optional[str], port: Optional[int]) -> int:
    """Serve the HTTP API."""
    from watersort.api import create_app

    app = create_app(settings)
    app.run(
        host=host or settings["host"],
        port=port or settings["port"],
        debug=settings.get("debug_enabled", False),
    )
    return 0


def run_solve(settings: dict, path: str, loose: bool, max_states: Optional[int]) -> int:
    """Solve a JSON puzzle file and print the moves."""
    from watersort.api.validation import RequestValidationError, parse_solve_request
    from watersort.puzzle_io import format_move, format_state, load_puzzle_file
    from watersort.solver import VialState, solve_puzzle

    try:
        vials, options = load_puzzle_file(path)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot load puzzle: {e}")
        return 2

    # Same checks as the HTTP boundary
    try:
        puzzle = parse_solve_request({
            "gameState": {"vials": vials},
            "strictMode": options.get("strictMode", settings["strict_mode"]),
        })
    except RequestValidationError as e:
        logger.error(f"Invalid puzzle in {path}: {e}")
        return 2

    vials = puzzle.vials
    strict_mode = puzzle.strict_mode and not loose
    solution = solve_puzzle(
        vials,
        strict_mode=strict_mode,
        max_states=max_states or settings["max_states"],
    )

    print(format_state(VialState.from_lists(vials)))
    print()
    if not solution.success:
        print(solution.message)
        return 1

    print(f"Solved in {solution.move_count} moves "
          f"({solution.metrics.states_explored} states explored):")
    for i, move in enumerate(solution.moves):
        print(f"  {i + 1}. {format_move(move)}")
    return 0


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Water Sort Solver - Shortest solutions for water sort puzzles"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--serve",
        action="store_true",
        help="Run the HTTP API instead of the desktop window"
    )
    mode.add_argument(
        "--solve",
        metavar="FILE",
        help="Solve a JSON puzzle file and print the moves"
    )
    parser.add_argument("--host", help="API bind address (default from config.json)")
    parser.add_argument("--port", type=int, help="API port (default from config.json)")
    parser.add_argument(
        "--loose",
        action="store_true",
        help="Accept any monochrome arrangement (with --solve)"
    )
    parser.add_argument(
        "--max-states",
        type=int,
        help="Search budget in expanded states (with --solve)"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main():
    """Initialize and run the Water Sort Solver."""
    args = parse_args()
    settings = load_settings()
    configure_logging(args.debug or settings.get("debug_enabled", False))

    if args.serve:
        sys.exit(run_server(settings, args.host, args.port))
    if args.solve:
        sys.exit(run_solve(settings, args.solve, args.loose, args.max_states))
    sys.exit(run_gui(settings))


if __name__ == "__main__":
    main()
