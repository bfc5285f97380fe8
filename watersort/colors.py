"""
Color helpers for displaying vial contents.
"""

from typing import Dict, List

# Display color for each known color name
COLOR_MAP: Dict[str, str] = {
    "red": "#FF0000",
    "green": "#2ecc71",
    "blue": "#3498db",
    "yellow": "#f1c40f",
    "orange": "#e67e22",
    "purple": "#9b59b6",
    "cyan": "#00FFFF",
}

UNKNOWN_COLOR = "#000000"


def get_color_hex(color_name: str) -> str:
    """Hex display color for a color name, black if unknown."""
    return COLOR_MAP.get(str(color_name).lower(), UNKNOWN_COLOR)


def get_contrast_color(bg_color: str) -> str:
    """
    Pick black or white text for a background color.

    Args:
        bg_color: Background color as "#RRGGBB"

    Returns:
        "#000000" for bright backgrounds, "#ffffff" for dark ones
    """
    hex_value = bg_color.lstrip("#")
    r = int(hex_value[0:2], 16)
    g = int(hex_value[2:4], 16)
    b = int(hex_value[4:6], 16)

    luminance = (0.299 * r + 0.587 * g + 0.114 * b) / 255
    return "#000000" if luminance > 0.5 else "#ffffff"


def is_valid_color(color_name: str) -> bool:
    return str(color_name).lower() in COLOR_MAP


def get_available_colors() -> List[str]:
    return list(COLOR_MAP.keys())


def unknown_colors(vials: List[List[str]]) -> List[str]:
    """
    Color names in the vials that have no display color.

    Args:
        vials: Vials bottom to top

    Returns:
        Unknown names in first-seen order, without duplicates
    """
    unknown: List[str] = []
    for vial in vials:
        for color in vial:
            if not is_valid_color(color) and color not in unknown:
                unknown.append(color)
    return unknown
