"""
Colour helpers: hex parsing, nearest named colour and readable text contrast.

All functions are pure and operate over the fixed palette in
``alpsvault.utils.color_names``.
"""

import math
import re
from typing import NamedTuple

from alpsvault.utils.color_names import COLORS, NamedColor

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9A-F]{3}){1,2}$", re.IGNORECASE)

RGB = tuple[int, int, int]


class ColorMatch(NamedTuple):
    """Closest palette entry to a given colour."""

    name: str
    hex: str
    distance: float


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Convert "#RGB", "#RRGGBB" (leading '#' optional) to an RGB triple.

    Raises:
        ValueError: If the string is not a 3 or 6 digit hex colour
    """
    value = hex_color[1:] if hex_color.startswith("#") else hex_color
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"Not a hex colour: {hex_color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def color_distance(rgb1: RGB, rgb2: RGB) -> float:
    """Euclidean distance between two RGB colours."""
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(rgb1, rgb2)))


def find_exact_color(hex_color: str, palette: list[NamedColor] = COLORS) -> NamedColor | None:
    """Return the palette entry whose hex equals ``hex_color`` (case-insensitive)."""
    wanted = hex_color.lower()
    for color in palette:
        if color.hex.lower() == wanted:
            return color
    return None


def find_closest_color(hex_color: str, palette: list[NamedColor] = COLORS) -> ColorMatch | None:
    """
    Find the closest palette colour by Euclidean RGB distance.

    Args:
        hex_color: Colour string, must start with '#'
        palette: Named colours to search

    Returns:
        Closest match, or None if the input is not a valid hex colour
    """
    if not hex_color.startswith("#"):
        return None

    try:
        target = hex_to_rgb(hex_color)
    except ValueError:
        return None

    closest: ColorMatch | None = None
    for color in palette:
        distance = color_distance(target, hex_to_rgb(color.hex))
        if closest is None or distance < closest.distance:
            closest = ColorMatch(color.name, color.hex, distance)

    return closest


def color_name_for(hex_color: str) -> str | None:
    """Friendly name for a colour: exact palette match first, else nearest."""
    exact = find_exact_color(hex_color)
    if exact:
        return exact.name
    closest = find_closest_color(hex_color)
    return closest.name if closest else None


def get_contrasting_text_color(hex_color: str) -> str:
    """Black or white, whichever reads better on ``hex_color`` (YIQ brightness)."""
    if not hex_color:
        return "#000000"
    try:
        r, g, b = hex_to_rgb(hex_color)
    except ValueError:
        return "#000000"
    yiq = (r * 299 + g * 587 + b * 114) / 1000
    return "#000000" if yiq >= 128 else "#FFFFFF"
