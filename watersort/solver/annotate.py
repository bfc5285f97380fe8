"""
Annotate Module - Replays a raw move path to attach color and quantity.

Kept separate from the search so that the search hot path only tracks
(source, target) pairs.
"""

from typing import List, Sequence

from .move import AnnotatedMove, Move
from .state import VialState


def annotate(moves: Sequence[Move], initial: VialState) -> List[AnnotatedMove]:
    """
    Attach color and units to each move by replaying it from `initial`.

    Args:
        moves: Raw moves in execution order
        initial: State the moves start from

    Returns:
        One AnnotatedMove per input move, in the same order

    Raises:
        InvalidMoveError: If a move is not valid at its point in the replay
    """
    annotated: List[AnnotatedMove] = []
    state = initial

    for move in moves:
        color, units = state.pour_units(move.source, move.target)
        annotated.append(AnnotatedMove(move.source, move.target, color, units))
        state = state.apply_move(move)

    return annotated


def replay(moves: Sequence[Move], initial: VialState) -> List[VialState]:
    """
    Compute the state after each move.

    Args:
        moves: Moves in execution order
        initial: Starting state

    Returns:
        List of states; first entry is `initial`, entry i+1 follows move i
    """
    states = [initial]
    for move in moves:
        states.append(states[-1].apply_move(move))
    return states
