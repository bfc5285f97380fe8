"""
Control UI Module for the Water Sort Solver

Provides a PyQt5-based window for entering a puzzle, running the solver
and stepping through the solution.
"""

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QPushButton, QHBoxLayout,
    QCheckBox, QPlainTextEdit, QListWidget, QListWidgetItem
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont, QColor

from watersort.colors import (
    get_available_colors, get_color_hex, get_contrast_color, unknown_colors
)
from watersort.puzzle_io import format_move, format_state, parse_vials_text
from watersort.solver import Solution, VialState


EXAMPLE_PUZZLE = """red, blue, red
blue, red, blue
-
"""


class ControlWindow(QMainWindow):
    """
    Main window for the Water Sort Solver application.

    Left: puzzle editor (one vial per line, bottom to top) and controls.
    Right: solution move list and the vial state after the selected move.
    """

    # Signals for worker thread communication
    solve_requested = pyqtSignal(object, bool)  # (vials, strict_mode)
    stop_requested = pyqtSignal()
    shutdown_requested = pyqtSignal()
    strict_mode_toggled = pyqtSignal(bool)

    def __init__(self):
        super().__init__()
        self._is_running = False
        self._solution = None
        self._init_ui()

    def _init_ui(self):
        """Initialize the user interface components."""
        self.setWindowTitle("Water Sort Solver")
        self.resize(760, 480)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QHBoxLayout()
        layout.setSpacing(10)
        layout.setContentsMargins(20, 20, 20, 20)
        central_widget.setLayout(layout)

        mono_font = QFont("Monospace", 10)
        mono_font.setStyleHint(QFont.TypeWriter)

        # Left column: editor and controls
        left = QVBoxLayout()
        left.addWidget(QLabel("Vials (one per line, bottom to top, '-' = empty):"))

        self.editor = QPlainTextEdit()
        self.editor.setFont(mono_font)
        self.editor.setPlainText(EXAMPLE_PUZZLE)
        left.addWidget(self.editor, 1)

        self.strict_checkbox = QCheckBox("Strict mode (each color in one full vial)")
        self.strict_checkbox.setChecked(True)
        self.strict_checkbox.toggled.connect(self.strict_mode_toggled.emit)
        left.addWidget(self.strict_checkbox)

        self.toggle_button = QPushButton("SOLVE")
        self.toggle_button.setMinimumHeight(45)
        button_font = QFont()
        button_font.setPointSize(11)
        button_font.setBold(True)
        self.toggle_button.setFont(button_font)
        self.toggle_button.clicked.connect(self._on_toggle_clicked)
        left.addWidget(self.toggle_button)

        self.status_label = QLabel("Status: Idle")
        status_font = QFont()
        status_font.setBold(True)
        self.status_label.setFont(status_font)
        self.status_label.setWordWrap(True)
        left.addWidget(self.status_label)

        self.progress_label = QLabel("Search: --")
        left.addWidget(self.progress_label)

        self.color_warning_label = QLabel("")
        self.color_warning_label.setWordWrap(True)
        self.color_warning_label.setStyleSheet("color: #e67e22;")
        left.addWidget(self.color_warning_label)
        layout.addLayout(left, 1)

        # Right column: solution
        right = QVBoxLayout()
        self.moves_label = QLabel("Moves: --")
        right.addWidget(self.moves_label)

        self.moves_list = QListWidget()
        self.moves_list.currentRowChanged.connect(self._on_move_selected)
        right.addWidget(self.moves_list, 1)

        self.state_view = QLabel("")
        self.state_view.setFont(mono_font)
        self.state_view.setTextInteractionFlags(Qt.TextSelectableByMouse)
        right.addWidget(self.state_view)
        layout.addLayout(right, 1)

        self._apply_styles()

    def _apply_styles(self):
        """Apply clean, minimal styling to the window."""
        self.setStyleSheet("""
            QMainWindow {
                background-color: #f5f5f5;
            }
            QPushButton {
                background-color: #4CAF50;
                color: white;
                border: none;
                border-radius: 5px;
                padding: 10px;
            }
            QPushButton:hover {
                background-color: #45a049;
            }
            QLabel {
                color: #333333;
            }
        """)

    def _on_toggle_clicked(self):
        """Handle Solve/Stop button click."""
        if self._is_running:
            self.stop_requested.emit()
            return

        try:
            vials = parse_vials_text(self.editor.toPlainText())
        except ValueError as e:
            self.set_status(f"Error: {e}")
            return

        if not vials:
            self.set_status("Error: enter at least one vial")
            return

        self._warn_unknown_colors(vials)

        self.state_view.setText(format_state(VialState.from_lists(vials)))
        self.solve_requested.emit(vials, self.strict_checkbox.isChecked())

    def _warn_unknown_colors(self, vials):
        """Flag color names the move list cannot tint. The solve still runs."""
        unknown = unknown_colors(vials)
        if unknown:
            self.color_warning_label.setText(
                f"Unknown colors: {', '.join(unknown)} "
                f"(known: {', '.join(get_available_colors())})"
            )
        else:
            self.color_warning_label.setText("")

    def _on_move_selected(self, row: int):
        """Show the state after the selected move (row -1 shows the start)."""
        if self._solution is None or not self._solution.states:
            return
        if row < 0:
            state = self._solution.states[0]
        else:
            state = self._solution.get_state_after_move(row)
        self.state_view.setText(format_state(state))

    def set_strict_mode(self, strict: bool):
        self.strict_checkbox.setChecked(strict)

    def set_status(self, status: str):
        """
        Update the status label.

        Args:
            status: Status text to display (e.g., "Idle", "Solving...", "Error: message")
        """
        self.status_label.setText(f"Status: {status}")

        if status.lower().startswith("error") or status.lower().startswith("no solution"):
            self.status_label.setStyleSheet("color: #d32f2f;")
        elif status.lower().startswith("solved"):
            self.status_label.setStyleSheet("color: #4CAF50;")
        else:
            self.status_label.setStyleSheet("color: #333333;")

    def set_progress(self, fraction: float, message: str):
        self.progress_label.setText(f"Search: {fraction * 100:.0f}% - {message}")

    def show_solution(self, solution: Solution):
        """
        Fill the move list from a finished solution.

        Args:
            solution: Solution emitted by the worker
        """
        self._solution = solution
        self.moves_list.clear()

        for i, move in enumerate(solution.moves):
            item = QListWidgetItem(f"{i + 1}. {format_move(move)}")
            background = get_color_hex(move.color)
            item.setBackground(QColor(background))
            item.setForeground(QColor(get_contrast_color(background)))
            self.moves_list.addItem(item)

        metrics = solution.metrics
        self.moves_label.setText(
            f"Moves: {solution.move_count} "
            f"({metrics.states_explored} states, {metrics.computation_time_ms:.0f}ms)"
        )
        if solution.states:
            self.state_view.setText(format_state(solution.states[0]))

    def set_running(self, is_running: bool):
        """
        Toggle the button state.

        Args:
            is_running: True while a solve is in progress
        """
        self._is_running = is_running
        self.editor.setReadOnly(is_running)
        self.strict_checkbox.setEnabled(not is_running)

        if is_running:
            self.toggle_button.setText("STOP")
            self.toggle_button.setStyleSheet("background-color: #f44336;")
            self.moves_list.clear()
            self.moves_label.setText("Moves: --")
            self.progress_label.setText("Search: --")
        else:
            self.toggle_button.setText("SOLVE")
            self.toggle_button.setStyleSheet("")

    def closeEvent(self, event):
        """
        Handle window close event.

        Emits shutdown_requested signal before closing to allow
        graceful cleanup of worker threads.

        Args:
            event: QCloseEvent object
        """
        self.shutdown_requested.emit()
        event.accept()
