"""
Module: io.colors

Purpose:
    Named-colour table used to resolve background and mask colours before
    they reach the composer. "Transparent" is reserved: it means no fill or
    no mask, not a transparent fill.

Key Functions:
    - color_names(): Every selectable colour name
    - resolve_color(): Name -> RGBA tuple, or None for "Transparent"

Dependencies:
    - PIL.ImageColor: RGB values for the web colour names

Used By:
    - config.PackConfig: Resolves background/mask names
    - cli: `colors` sub-command
"""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from PIL import ImageColor

from spritesheet_toolkit.core.errors import InvalidArgumentError
from spritesheet_toolkit.core.models import RGBA

TRANSPARENT = "Transparent"

KNOWN_COLOR_NAMES = (
    TRANSPARENT,
    "AliceBlue", "AntiqueWhite", "Aqua", "Aquamarine", "Azure", "Beige",
    "Bisque", "Black", "BlanchedAlmond", "Blue", "BlueViolet", "Brown",
    "BurlyWood", "CadetBlue", "Chartreuse", "Chocolate", "Coral",
    "CornflowerBlue", "Cornsilk", "Crimson", "Cyan", "DarkBlue", "DarkCyan",
    "DarkGoldenrod", "DarkGray", "DarkGreen", "DarkKhaki", "DarkMagenta",
    "DarkOliveGreen", "DarkOrange", "DarkOrchid", "DarkRed", "DarkSalmon",
    "DarkSeaGreen", "DarkSlateBlue", "DarkSlateGray", "DarkTurquoise",
    "DarkViolet", "DeepPink", "DeepSkyBlue", "DimGray", "DodgerBlue",
    "Firebrick", "FloralWhite", "ForestGreen", "Fuchsia", "Gainsboro",
    "GhostWhite", "Gold", "Goldenrod", "Gray", "Green", "GreenYellow",
    "Honeydew", "HotPink", "IndianRed", "Indigo", "Ivory", "Khaki",
    "Lavender", "LavenderBlush", "LawnGreen", "LemonChiffon", "LightBlue",
    "LightCoral", "LightCyan", "LightGoldenrodYellow", "LightGray",
    "LightGreen", "LightPink", "LightSalmon", "LightSeaGreen", "LightSkyBlue",
    "LightSlateGray", "LightSteelBlue", "LightYellow", "Lime", "LimeGreen",
    "Linen", "Magenta", "Maroon", "MediumAquamarine", "MediumBlue",
    "MediumOrchid", "MediumPurple", "MediumSeaGreen", "MediumSlateBlue",
    "MediumSpringGreen", "MediumTurquoise", "MediumVioletRed", "MidnightBlue",
    "MintCream", "MistyRose", "Moccasin", "NavajoWhite", "Navy", "OldLace",
    "Olive", "OliveDrab", "Orange", "OrangeRed", "Orchid", "PaleGoldenrod",
    "PaleGreen", "PaleTurquoise", "PaleVioletRed", "PapayaWhip", "PeachPuff",
    "Peru", "Pink", "Plum", "PowderBlue", "Purple", "Red", "RosyBrown",
    "RoyalBlue", "SaddleBrown", "Salmon", "SandyBrown", "SeaGreen",
    "SeaShell", "Sienna", "Silver", "SkyBlue", "SlateBlue", "SlateGray",
    "Snow", "SpringGreen", "SteelBlue", "Tan", "Teal", "Thistle", "Tomato",
    "Turquoise", "Violet", "Wheat", "White", "WhiteSmoke", "Yellow",
    "YellowGreen",
)


def _build_table() -> Dict[str, RGBA]:
    table: Dict[str, RGBA] = {}
    for name in KNOWN_COLOR_NAMES:
        if name == TRANSPARENT:
            continue
        red, green, blue = ImageColor.getrgb(name.lower())[:3]
        table[name.lower()] = (red, green, blue, 255)
    return table


# Lower-cased name -> opaque RGBA, built once at import
NAMED_COLORS: Dict[str, RGBA] = _build_table()


def color_names() -> List[str]:
    """All selectable colour names, "Transparent" first."""
    return list(KNOWN_COLOR_NAMES)


def resolve_color(name: Union[str, RGBA, None]) -> Optional[RGBA]:
    """
    Resolve a colour name to an RGBA tuple.

    Names are matched case-insensitively against KNOWN_COLOR_NAMES. Other
    strings go through PIL's colour parser, so "#ff00ff" and "rgb(...)"
    also work. An RGBA tuple is passed through unchanged.

    Args:
        name: Colour name, colour string, RGBA tuple or None

    Returns:
        RGBA tuple, or None for None, "" and "Transparent"

    Raises:
        InvalidArgumentError: If the colour cannot be resolved

    Example:
        >>> resolve_color("Magenta")
        (255, 0, 255, 255)
        >>> resolve_color("Transparent") is None
        True
    """
    if name is None:
        return None
    if isinstance(name, tuple):
        return name

    key = name.strip().lower()
    if not key or key == TRANSPARENT.lower():
        return None

    color = NAMED_COLORS.get(key)
    if color is not None:
        return color

    try:
        parsed = ImageColor.getrgb(name.strip())
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown colour: {name!r}") from e

    if len(parsed) == 3:
        return (parsed[0], parsed[1], parsed[2], 255)
    return (parsed[0], parsed[1], parsed[2], parsed[3])
