"""
Goal Module - Solved-state predicates for loose and strict play.
"""

from enum import Enum

from .state import VIAL_CAPACITY, VialState, color_totals


class GoalMode(Enum):
    """
    Goal conditions.

    LOOSE: every vial is empty or holds a single color
    STRICT: LOOSE, plus every color sits in exactly one vial filled to
            min(total units of that color, vial capacity)
    """
    LOOSE = "loose"
    STRICT = "strict"

    @classmethod
    def from_strict(cls, strict: bool) -> 'GoalMode':
        return cls.STRICT if strict else cls.LOOSE


def is_monochrome(vial) -> bool:
    """True if the vial is empty or all of its units share one color."""
    return all(unit == vial[0] for unit in vial)


def is_solved(state: VialState, mode: GoalMode) -> bool:
    """
    Check whether a state satisfies the goal condition.

    Args:
        state: State to check
        mode: Loose or strict goal

    Returns:
        True if the puzzle is solved under `mode`
    """
    if not all(is_monochrome(vial) for vial in state.vials):
        return False

    if mode is GoalMode.LOOSE:
        return True

    # Each color may own only one vial
    color_vial = {}
    for index, vial in enumerate(state.vials):
        if not vial:
            continue
        color = vial[0]
        if color in color_vial:
            return False
        color_vial[color] = index

    for color, total in color_totals(state).items():
        vial = state.vials[color_vial[color]]
        if len(vial) != min(total, VIAL_CAPACITY):
            return False

    return True
