"""
Tests for the background solver worker.

run() is called directly so the solve happens on the test thread and the
signals are delivered synchronously.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

pytest.importorskip("PyQt5.QtCore")

from watersort.solver import SolveStatus
from watersort.solver_worker import SolverWorker


def run_worker(worker):
    events = {"status": [], "solutions": [], "errors": []}
    worker.status_changed.connect(events["status"].append)
    worker.solution_ready.connect(events["solutions"].append)
    worker.error_occurred.connect(events["errors"].append)
    worker.run()
    return events


def test_worker_emits_solution():
    worker = SolverWorker([["red", "blue"], ["blue", "red"], []], strict_mode=True)
    events = run_worker(worker)

    assert events["errors"] == []
    assert len(events["solutions"]) == 1
    solution = events["solutions"][0]
    assert solution.status is SolveStatus.SOLVED
    assert worker.solution is solution
    assert events["status"] == ["Solving...", "Solved in 3 moves"]


def test_worker_reports_no_solution():
    worker = SolverWorker([["red", "blue"], ["blue", "red"]])
    events = run_worker(worker)

    assert events["solutions"][0].status is SolveStatus.EXHAUSTED
    assert events["status"][-1].startswith("No solution found")


def test_worker_stop_cancels_search():
    worker = SolverWorker([["red", "blue"], ["blue", "red"], []])
    worker.request_stop()
    events = run_worker(worker)

    assert events["solutions"][0].status is SolveStatus.CANCELLED


def test_worker_reports_errors():
    # Vial entries that are lists are unhashable colors
    worker = SolverWorker([[["red"]], []])
    events = run_worker(worker)

    assert events["solutions"] == []
    assert len(events["errors"]) == 1
