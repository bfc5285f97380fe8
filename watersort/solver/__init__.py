"""
Solver Package - Shortest-path solver for the water sort puzzle.

Given a list of vials and a goal mode, finds the shortest sequence of pours
that sorts the vials, then annotates each pour with the color and number of
units it moves.

Public API:
    - VialState: Immutable vial configuration
    - Move / AnnotatedMove: Raw and annotated pours
    - GoalMode, is_solved(): Loose and strict goal checks
    - SolutionContext: Inputs, budget and cancellation for one solve
    - Solution, SolutionMetrics, SolveStatus: Result of a solve
    - BreadthFirstStrategy: The shortest-path search
    - annotate(), replay(): Post-search move annotation
    - solve_puzzle(), solve(): Entry points from plain vial lists

Usage:
    from watersort.solver import solve_puzzle

    solution = solve_puzzle([["red", "blue"], ["blue", "red"], [], []])
    for move in solution.moves:
        print(f"Pour {move.units} {move.color} from {move.source} to {move.target}")
"""

# Core data structures
from .state import (
    VIAL_CAPACITY,
    InvalidMoveError,
    VialState,
    color_totals,
    top_run,
)
from .move import Move, AnnotatedMove
from .goal import GoalMode, is_solved
from .context import SolutionContext, MAX_STATES
from .solution import Solution, SolutionMetrics, SolveStatus

# Search and reporting
from .base import SolverStrategy, successors
from .strategies import BreadthFirstStrategy, SearchNode
from .annotate import annotate, replay
from .runner import solve_puzzle, solve

__all__ = [
    # Data structures
    "VIAL_CAPACITY",
    "InvalidMoveError",
    "VialState",
    "color_totals",
    "top_run",
    "Move",
    "AnnotatedMove",
    "GoalMode",
    "is_solved",
    "SolutionContext",
    "MAX_STATES",
    "Solution",
    "SolutionMetrics",
    "SolveStatus",
    # Search
    "SolverStrategy",
    "successors",
    "BreadthFirstStrategy",
    "SearchNode",
    "annotate",
    "replay",
    "solve_puzzle",
    "solve",
]
