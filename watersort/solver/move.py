"""
Move Module - Pours between vials, raw and annotated.
"""

from dataclasses import dataclass
from typing import Any, Dict, Hashable


@dataclass(frozen=True)
class Move:
    """
    Represents a pour from one vial into another.

    Attributes:
        source: Index of the vial poured from
        target: Index of the vial poured into
    """
    source: int
    target: int

    def to_dict(self) -> Dict[str, int]:
        return {"from": self.source, "to": self.target}


@dataclass(frozen=True)
class AnnotatedMove:
    """
    A pour with the color and quantity it actually transferred.

    Derived from a Move by replaying it; used for reporting only.

    Attributes:
        source: Index of the vial poured from
        target: Index of the vial poured into
        color: Color of the poured units
        units: Number of units transferred
    """
    source: int
    target: int
    color: Hashable
    units: int

    @property
    def move(self) -> Move:
        """The raw move this annotation describes."""
        return Move(self.source, self.target)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the JSON shape used by the HTTP API.

        Returns:
            Dict with 'from', 'to', 'color' and 'units' keys
        """
        return {
            "from": self.source,
            "to": self.target,
            "color": self.color,
            "units": self.units,
        }
