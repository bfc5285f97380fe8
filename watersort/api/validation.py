"""
Request validation for the solve endpoint.

Shape:
    {
        "gameState": {"vials": [["red", "blue"], [], ...]},
        "strictMode": true,        # optional, default true
        "maxStates": 100000        # optional, positive int
    }
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from watersort.solver import VIAL_CAPACITY


class RequestValidationError(ValueError):
    """Raised when a request body does not match the expected shape."""


@dataclass
class SolveRequest:
    """Validated solve request."""
    vials: List[List[str]]
    strict_mode: bool = True
    max_states: Optional[int] = None


def parse_solve_request(data: Any) -> SolveRequest:
    """
    Validate a decoded JSON body for POST /api/solve.

    Args:
        data: Decoded JSON body (may be None if the body was not JSON)

    Returns:
        SolveRequest

    Raises:
        RequestValidationError: With a message naming the offending field
    """
    if not isinstance(data, dict):
        raise RequestValidationError("Request body must be a JSON object")

    game_state = data.get('gameState')
    if not isinstance(game_state, dict):
        raise RequestValidationError("gameState must be an object")

    vials = game_state.get('vials')
    if not isinstance(vials, list):
        raise RequestValidationError("gameState.vials must be an array of vials")

    for i, vial in enumerate(vials):
        if not isinstance(vial, list):
            raise RequestValidationError(f"gameState.vials[{i}] must be an array")
        if not all(isinstance(color, str) for color in vial):
            raise RequestValidationError(f"gameState.vials[{i}] must contain only strings")
        if len(vial) > VIAL_CAPACITY:
            raise RequestValidationError(
                f"gameState.vials[{i}] holds {len(vial)} colors, capacity is {VIAL_CAPACITY}"
            )

    strict_mode = data.get('strictMode', True)
    if not isinstance(strict_mode, bool):
        raise RequestValidationError("strictMode must be a boolean")

    max_states = data.get('maxStates')
    if max_states is not None:
        # bool is an int subclass
        if isinstance(max_states, bool) or not isinstance(max_states, int) or max_states <= 0:
            raise RequestValidationError("maxStates must be a positive integer")

    return SolveRequest(vials=vials, strict_mode=strict_mode, max_states=max_states)
