"""
Breadth-First Strategy - Shortest pour sequence by exhaustive level search.

Explores every path of length k before any path of length k+1, marking a
state visited the first time it is discovered. The first solved state
reached is therefore reached by a minimum-length path.
"""

import time
import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional, Set, Tuple

from ..base import SolverStrategy
from ..move import Move
from ..state import VialState, StateKey
from ..context import SolutionContext
from ..goal import is_solved
from ..annotate import annotate, replay
from ..solution import Solution, SolutionMetrics, SolveStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchNode:
    """
    Node in the breadth-first search.

    Attributes:
        state: Vial configuration at this node
        path: Moves taken from the initial state to reach it
    """
    state: VialState
    path: Tuple[Move, ...]

    @property
    def depth(self) -> int:
        return len(self.path)


class BreadthFirstStrategy(SolverStrategy):
    """
    Bounded breadth-first search over pour sequences.

    Algorithm:
        1. Return immediately if the initial state is already solved
        2. Seed a FIFO frontier and visited set with the initial state
        3. Dequeue the oldest node, expand every valid pour in
           (source, target) order, skip visited states, enqueue the rest
        4. Stop at the first solved successor, when the frontier empties,
           or after max_states nodes have been expanded

    Parameters:
        max_states: Expansion budget; overrides the context budget if given
        progress_interval: Report progress every N expansions
    """
    name = "bfs"
    description = "Breadth-First Search - Shortest solution"

    PROGRESS_INTERVAL = 10_000

    def __init__(self, max_states: Optional[int] = None, progress_interval: int = PROGRESS_INTERVAL):
        self.max_states = max_states
        self.progress_interval = progress_interval

    def solve(self, context: SolutionContext) -> Solution:
        """
        Find the shortest solving path for the context's initial state.

        Args:
            context: Solution context with state, goal mode and budget

        Returns:
            Solution; status tells solved, unsolvable, budget or cancelled
        """
        start_time = time.perf_counter()
        initial = context.state
        mode = context.mode
        max_states = self.max_states if self.max_states is not None else context.max_states

        if is_solved(initial, mode):
            logger.info(f"[BFS] Initial state already solved ({mode.value})")
            return self._build_solution(
                SolveStatus.ALREADY_SOLVED, initial, (), start_time, 0, 1, 1
            )

        frontier: Deque[SearchNode] = deque([SearchNode(initial, ())])
        visited: Set[StateKey] = {initial.key}
        states_explored = 0
        max_frontier = 1

        while frontier and states_explored < max_states:
            if self._check_cancelled(context):
                logger.info(f"[BFS] Cancelled after {states_explored} states")
                return self._build_solution(
                    SolveStatus.CANCELLED, initial, (), start_time,
                    states_explored, len(visited), max_frontier
                )

            node = frontier.popleft()
            states_explored += 1

            for move, next_state in self.successors(node.state):
                key = next_state.key
                if key in visited:
                    continue
                visited.add(key)

                child = SearchNode(next_state, node.path + (move,))
                frontier.append(child)

                if is_solved(next_state, mode):
                    logger.info(
                        f"[BFS] Solved in {child.depth} moves, "
                        f"{states_explored} states explored, {len(visited)} discovered"
                    )
                    return self._build_solution(
                        SolveStatus.SOLVED, initial, child.path, start_time,
                        states_explored, len(visited), max(max_frontier, len(frontier))
                    )

            max_frontier = max(max_frontier, len(frontier))

            if states_explored % self.progress_interval == 0:
                context.report_progress(
                    min(0.99, states_explored / max_states),
                    f"{states_explored} states explored, depth {node.depth}"
                )
                logger.debug(
                    f"[BFS] {states_explored} explored, frontier {len(frontier)}, "
                    f"depth {node.depth}"
                )

        status = SolveStatus.BUDGET_EXCEEDED if frontier else SolveStatus.EXHAUSTED
        logger.info(
            f"[BFS] No solution ({status.value}): {states_explored} states explored, "
            f"{len(visited)} discovered"
        )
        return self._build_solution(
            status, initial, (), start_time,
            states_explored, len(visited), max_frontier
        )

    def _build_solution(
        self,
        status: SolveStatus,
        initial: VialState,
        path: Tuple[Move, ...],
        start_time: float,
        states_explored: int,
        states_discovered: int,
        max_frontier: int
    ) -> Solution:
        """Build Solution object from search results."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        return Solution(
            status=status,
            path=path,
            moves=annotate(path, initial),
            states=replay(path, initial),
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                states_explored=states_explored,
                states_discovered=states_discovered,
                max_frontier=max_frontier,
                strategy_name=self.name
            )
        )


__all__ = ["BreadthFirstStrategy", "SearchNode"]
