"""
Base Strategy Module - Abstract base class for solving strategies.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Tuple

from .context import SolutionContext
from .move import Move
from .solution import Solution
from .state import VialState


def successors(state: VialState) -> Iterator[Tuple[Move, VialState]]:
    """
    Enumerate every valid pour and the state it produces.

    Order is ascending source, then ascending target. Search strategies
    rely on this order to break ties between equally short solutions.

    Args:
        state: Current state

    Yields:
        (move, next_state) pairs
    """
    count = state.num_vials
    for source in range(count):
        if not state.vials[source]:
            continue
        for target in range(count):
            if state.is_valid_move(source, target):
                move = Move(source, target)
                yield move, state.apply_move(move)


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for UI
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute a solution for the context's initial state.

        Must periodically check context.is_cancelled() and stop
        with a CANCELLED solution if True.

        Args:
            context: Solution context with state, mode, budget, cancellation

        Returns:
            Solution with moves and metrics
        """
        pass

    def successors(self, state: VialState) -> Iterator[Tuple[Move, VialState]]:
        """Enumerate valid (move, next_state) pairs in deterministic order."""
        return successors(state)

    def _check_cancelled(self, context: SolutionContext) -> bool:
        """
        Convenience method to check cancellation.

        Args:
            context: Solution context

        Returns:
            True if strategy should stop
        """
        return context.is_cancelled()
