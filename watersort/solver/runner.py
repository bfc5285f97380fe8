"""
Runner Module - Entry points that turn raw vial lists into solver results.
"""

import logging
import threading
from typing import Any, Callable, Dict, Optional, Sequence

from .context import SolutionContext, MAX_STATES
from .goal import GoalMode
from .solution import Solution
from .state import Color, VialState
from .strategies import BreadthFirstStrategy

logger = logging.getLogger(__name__)


def solve_puzzle(
    vials: Sequence[Sequence[Color]],
    strict_mode: bool = True,
    max_states: int = MAX_STATES,
    cancel_flag: Optional[threading.Event] = None,
    timeout_sec: Optional[float] = None,
    progress_callback: Optional[Callable[[float, str], None]] = None
) -> Solution:
    """
    Solve a puzzle given as plain vial lists.

    Args:
        vials: Vials bottom to top; each at most VIAL_CAPACITY long
        strict_mode: Require every color consolidated into one vial
        max_states: Search expansion budget
        cancel_flag: Event the host may set to abandon the search
        timeout_sec: Optional wall-clock limit
        progress_callback: Receives (fraction, message) during the search

    Returns:
        Solution with annotated moves, status and metrics
    """
    state = VialState.from_lists(vials)
    context = SolutionContext(
        state=state,
        mode=GoalMode.from_strict(strict_mode),
        max_states=max_states,
        timeout_sec=timeout_sec,
        progress_callback=progress_callback,
    )
    if cancel_flag is not None:
        context.cancel_flag = cancel_flag

    logger.debug(
        f"Solving {state.num_vials} vials, mode={context.mode.value}, "
        f"max_states={max_states}"
    )
    return BreadthFirstStrategy().solve(context)


def solve(vials: Sequence[Sequence[Color]], strict: bool = True) -> Dict[str, Any]:
    """
    Solve a puzzle and return the JSON-ready solver result.

    Args:
        vials: Vials bottom to top
        strict: Strict (consolidated) or loose (monochrome) goal

    Returns:
        {"success": bool, "moves": [{"from", "to", "color", "units"}, ...],
         "message"?: str}
    """
    return solve_puzzle(vials, strict_mode=strict).to_result()
