"""
Puzzle I/O Module - Reading puzzles from text and JSON, formatting results.

Text format: one vial per line, colors bottom to top separated by commas.
An empty line or a single "-" is an empty vial; "#" starts a comment.

    red, blue, blue, red
    blue, red, red, blue
    -
    -
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from watersort.solver import VIAL_CAPACITY, AnnotatedMove, VialState

logger = logging.getLogger(__name__)

EMPTY_VIAL_MARK = "-"


def parse_vials_text(text: str) -> List[List[str]]:
    """
    Parse the one-vial-per-line text format.

    Leading and trailing blank lines are ignored; blank lines between
    vials are empty vials.

    Args:
        text: Puzzle text

    Returns:
        List of vials, each a list of color names bottom to top

    Raises:
        ValueError: If a vial holds more than VIAL_CAPACITY colors
    """
    # Comment-only lines are dropped, not read as empty vials
    lines = [
        (line_no, raw.split("#", 1)[0].strip())
        for line_no, raw in enumerate(text.splitlines(), start=1)
        if not raw.strip().startswith("#")
    ]

    # Trim blank lines around the puzzle
    while lines and not lines[0][1]:
        lines.pop(0)
    while lines and not lines[-1][1]:
        lines.pop()

    vials: List[List[str]] = []
    for line_no, line in lines:
        if not line or line == EMPTY_VIAL_MARK:
            vials.append([])
            continue

        colors = [color.strip() for color in line.split(",") if color.strip()]
        if len(colors) > VIAL_CAPACITY:
            raise ValueError(
                f"Line {line_no}: vial has {len(colors)} colors, "
                f"capacity is {VIAL_CAPACITY}"
            )
        vials.append(colors)

    return vials


def load_puzzle_file(path: Union[str, Path]) -> Tuple[List[List[Any]], Dict[str, Any]]:
    """
    Load a puzzle from a JSON file.

    Accepts {"vials": [...]} or the HTTP request shape
    {"gameState": {"vials": [...]}, "strictMode": bool}.

    Args:
        path: JSON file path

    Returns:
        (vials, options) where options holds any "strictMode" found

    Raises:
        ValueError: If the file does not contain a vial list
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    options: Dict[str, Any] = {}
    if isinstance(data, dict) and "gameState" in data:
        if "strictMode" in data:
            options["strictMode"] = data["strictMode"]
        data = data["gameState"]

    vials = data.get("vials") if isinstance(data, dict) else data
    if not isinstance(vials, list) or not all(isinstance(v, list) for v in vials):
        raise ValueError(f"{path}: expected a list of vials")

    logger.debug(f"Loaded {len(vials)} vials from {path}")
    return vials, options


def format_state(state: VialState) -> str:
    """
    Render a state as text columns, one column per vial, top row first.

    At least VIAL_CAPACITY rows are drawn; an overfull vial adds rows
    rather than being cut off.

    Args:
        state: State to render

    Returns:
        Multi-line string with vial numbers (1-based) underneath
    """
    if not state.vials:
        return "(no vials)"

    labels = [str(i + 1) for i in range(state.num_vials)]
    width = max(
        [len(str(color)) for vial in state.vials for color in vial] + [len(label) for label in labels]
    )

    height = max([VIAL_CAPACITY] + [len(vial) for vial in state.vials])
    rows = []
    for level in reversed(range(height)):
        cells = []
        for vial in state.vials:
            cell = str(vial[level]) if level < len(vial) else ""
            cells.append(cell.center(width))
        rows.append("|" + "|".join(cells) + "|")

    rows.append(" " + " ".join("-" * width for _ in labels) + " ")
    rows.append(" " + " ".join(label.center(width) for label in labels) + " ")
    return "\n".join(row.rstrip() for row in rows)


def format_move(move: AnnotatedMove) -> str:
    """Describe a pour for humans, with 1-based vial numbers."""
    return (
        f"Pour {move.units} {move.color} from vial {move.source + 1} "
        f"to vial {move.target + 1}"
    )
