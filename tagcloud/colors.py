"""
Color strings accepted on the command line.

Supported forms (all case-insensitive):
  - CSS/X11 color names ("Red", "indigo") from Pillow's color table
  - hex: RGB, RRGGBB or AARRGGBB, with or without a leading '#'
  - "R,G,B" and "A,R,G,B" with components in 0..255
"""

import re
from typing import Optional, Tuple

from PIL import ImageColor

from .exceptions import ColorParseError

RGBA = Tuple[int, int, int, int]

HEX_COLOR_RE = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
RGB_RE = re.compile(r"^\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*$")
ARGB_RE = re.compile(r"^\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*$")


def _parse_named(text: str) -> Optional[RGBA]:
    name = text.strip().lower()
    if name not in ImageColor.colormap:
        return None
    return ImageColor.getcolor(name, "RGBA")


def _parse_hex(text: str) -> Optional[RGBA]:
    match = HEX_COLOR_RE.match(text.strip())
    if match is None:
        return None
    digits = match.group(1)
    if len(digits) == 3:
        r, g, b = (int(c * 2, 16) for c in digits)
        return (r, g, b, 255)
    if len(digits) == 6:
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16), 255)
    # AARRGGBB
    a, r, g, b = (int(digits[i:i + 2], 16) for i in range(0, 8, 2))
    return (r, g, b, a)


def _parse_components(text: str) -> Optional[RGBA]:
    match = RGB_RE.match(text)
    if match is not None:
        r, g, b = (int(v) for v in match.groups())
        a = 255
    else:
        match = ARGB_RE.match(text)
        if match is None:
            return None
        a, r, g, b = (int(v) for v in match.groups())

    if any(v > 255 for v in (a, r, g, b)):
        return None
    return (r, g, b, a)


def parse_color(text: Optional[str]) -> Optional[RGBA]:
    """
    Parse a color string into an (R, G, B, A) tuple.
    Blank input returns None so callers can fall back to a default.
    """
    if text is None or not text.strip():
        return None

    for parser in (_parse_named, _parse_hex, _parse_components):
        color = parser(text)
        if color is not None:
            return color

    raise ColorParseError(f"Invalid color format: '{text}'")
