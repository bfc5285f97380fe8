"""
Vial State Module - Immutable vial configuration for the water sort puzzle.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .move import Move


# Maximum number of units a single vial can hold
VIAL_CAPACITY = 4

Color = Hashable
Vial = Tuple[Color, ...]
StateKey = Tuple[Vial, ...]


class InvalidMoveError(ValueError):
    """Raised when a pour is applied that the move rules do not allow."""


def top_run(vial: Sequence[Color]) -> Optional[Tuple[Color, int]]:
    """
    Get the contiguous run of identical colors at the top of a vial.

    Args:
        vial: Colors ordered bottom to top

    Returns:
        (color, count) of the top run, or None for an empty vial
    """
    if not vial:
        return None

    color = vial[-1]
    count = 0
    for unit in reversed(vial):
        if unit != color:
            break
        count += 1
    return color, count


@dataclass(frozen=True)
class VialState:
    """
    Immutable puzzle configuration.

    Uses tuple-of-tuples for hashability and immutability. Vial order is
    significant: two states with the same vials in a different order are
    different states.

    Attributes:
        vials: One tuple per vial, colors ordered bottom to top
    """
    vials: Tuple[Vial, ...]

    @classmethod
    def from_lists(cls, vials: Sequence[Sequence[Color]]) -> 'VialState':
        """
        Create VialState from a list of vial lists (e.g. parsed JSON).

        Args:
            vials: Sequence of vials, each a sequence of colors bottom to top

        Returns:
            VialState instance
        """
        return cls(vials=tuple(tuple(vial) for vial in vials))

    @property
    def key(self) -> StateKey:
        """Canonical deduplication key: vial contents in vial order."""
        return self.vials

    @property
    def num_vials(self) -> int:
        """Number of vials in the puzzle."""
        return len(self.vials)

    def free_space(self, index: int) -> int:
        """Units that can still be poured into vial `index`."""
        return VIAL_CAPACITY - len(self.vials[index])

    def is_full(self, index: int) -> bool:
        return len(self.vials[index]) >= VIAL_CAPACITY

    def is_valid_move(self, source: int, target: int) -> bool:
        """
        Check whether pouring from `source` into `target` is allowed.

        Args:
            source: Index of the vial to pour from
            target: Index of the vial to pour into

        Returns:
            True if the pour is legal in this state
        """
        if source == target:
            return False

        source_vial = self.vials[source]
        target_vial = self.vials[target]

        if not source_vial:
            return False
        if len(target_vial) >= VIAL_CAPACITY:
            return False
        if not target_vial:
            return True

        return source_vial[-1] == target_vial[-1]

    def pour_units(self, source: int, target: int) -> Tuple[Color, int]:
        """
        Color and number of units a valid pour would transfer.

        Raises:
            InvalidMoveError: If the pour is not allowed
        """
        if not self.is_valid_move(source, target):
            raise InvalidMoveError(
                f"Cannot pour from vial {source} into vial {target}: {self.to_list()}"
            )
        color, run_count = top_run(self.vials[source])
        return color, min(run_count, self.free_space(target))

    def apply_move(self, move: 'Move') -> 'VialState':
        """
        Apply a pour to create a new state.

        Moves the top run of the source vial into the target vial, limited
        by the target's free space. This state is unchanged.

        Args:
            move: Move to apply

        Returns:
            New VialState after the pour

        Raises:
            InvalidMoveError: If the move is not valid in this state
        """
        color, units = self.pour_units(move.source, move.target)

        new_vials = list(self.vials)
        new_vials[move.source] = self.vials[move.source][:-units]
        new_vials[move.target] = self.vials[move.target] + (color,) * units
        return VialState(vials=tuple(new_vials))

    def color_totals(self) -> Dict[Color, int]:
        """Total units of each color across all vials."""
        return color_totals(self)

    def to_list(self) -> List[List[Any]]:
        """
        Convert to mutable list-of-lists representation.

        Returns:
            List of vials, each a list of colors bottom to top
        """
        return [list(vial) for vial in self.vials]


def color_totals(state: VialState) -> Dict[Color, int]:
    """
    Count units of each color over all vials.

    Args:
        state: State to count

    Returns:
        Mapping of color to total unit count
    """
    totals: Counter = Counter()
    for vial in state.vials:
        totals.update(vial)
    return dict(totals)
