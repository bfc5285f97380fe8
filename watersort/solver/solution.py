"""
Solution Module - Result of a strategy computation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .move import AnnotatedMove, Move
from .state import VialState


class SolveStatus(Enum):
    """
    Outcome of a solve.

    ALREADY_SOLVED: Initial state satisfied the goal, no moves needed
    SOLVED: A shortest solving path was found
    EXHAUSTED: Every reachable state was explored, no solution exists
    BUDGET_EXCEEDED: Search stopped at the max_states limit
    CANCELLED: Host cancelled the search or its timeout expired
    """
    ALREADY_SOLVED = "already_solved"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    BUDGET_EXCEEDED = "budget_exceeded"
    CANCELLED = "cancelled"


# Messages reported for unsuccessful solves
STATUS_MESSAGES = {
    SolveStatus.EXHAUSTED: "No solution found. The puzzle is unsolvable.",
    SolveStatus.BUDGET_EXCEEDED: "No solution found. The puzzle may be unsolvable or too complex.",
    SolveStatus.CANCELLED: "Search cancelled before a solution was found.",
}


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of search nodes dequeued and expanded
        states_discovered: Number of distinct states seen (visited set size)
        max_frontier: Largest frontier size during the search
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    states_discovered: int = 0
    max_frontier: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    Attributes:
        status: How the search ended
        path: Raw moves of the solving path (empty unless solved)
        moves: Annotated moves, one per entry of path
        states: State after each move (first is initial)
        metrics: Performance statistics
    """
    status: SolveStatus
    path: Tuple[Move, ...] = ()
    moves: List[AnnotatedMove] = field(default_factory=list)
    states: List[VialState] = field(default_factory=list)
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def success(self) -> bool:
        """True if the returned moves solve the puzzle."""
        return self.status in (SolveStatus.SOLVED, SolveStatus.ALREADY_SOLVED)

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def message(self) -> Optional[str]:
        """Explanation for an unsuccessful solve, None on success."""
        return STATUS_MESSAGES.get(self.status)

    @property
    def final_state(self) -> Optional[VialState]:
        return self.states[-1] if self.states else None

    def get_state_after_move(self, index: int) -> VialState:
        """
        Get state after executing move at index.

        Args:
            index: Move index (0-based)

        Returns:
            VialState after move (index+1 in states)

        Raises:
            IndexError: If index out of range
        """
        return self.states[index + 1]

    def to_result(self) -> Dict[str, Any]:
        """
        Convert to the solver result returned by the HTTP API.

        Returns:
            {"success": bool, "moves": [...], "message"?: str}
        """
        result: Dict[str, Any] = {
            "success": self.success,
            "moves": [move.to_dict() for move in self.moves],
        }
        if self.message is not None:
            result["message"] = self.message
        return result
