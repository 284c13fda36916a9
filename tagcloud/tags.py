"""
Word tags: font size and color assignment, and arranging tags with a layouter.
"""

import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Protocol, Sequence, Tuple

from .colors import RGBA
from .exceptions import PlacementExhaustedError
from .geometry import Rectangle, Size
from .layouter import CircularCloudLayouter


@dataclass
class WordTag:
    text: str
    frequency: int
    font_size: int
    color: RGBA = (0, 0, 0, 255)
    rectangle: Optional[Rectangle] = None   # Set once the tag is arranged

    def __str__(self) -> str:
        return f"Word: '{self.text}' (freq: {self.frequency})"


def linear_font_size(frequency: int, min_size: int, max_size: int) -> int:
    """Grow one point per occurrence above min_size, capped at max_size."""
    return max(min_size, min(max_size, min_size + frequency))


# ---------------------------------------------------------------------------
# Color schemes
# ---------------------------------------------------------------------------

class ColorScheme(Protocol):
    def color_for(self, tag: WordTag, index: int, total: int) -> RGBA:
        ...


PASTEL_PALETTE: Tuple[RGBA, ...] = (
    (255, 182, 193, 255),
    (173, 216, 230, 255),
    (144, 238, 144, 255),
    (255, 222, 173, 255),
    (221, 160, 221, 255),
    (240, 230, 140, 255),
    (176, 224, 230, 255),
)


class RandomColorScheme:
    def __init__(self, seed: Optional[int] = None, palette: Sequence[RGBA] = PASTEL_PALETTE):
        if not palette:
            raise ValueError("palette must contain at least one color")
        self._rng = random.Random(seed)
        self.palette = tuple(palette)

    def color_for(self, tag: WordTag, index: int, total: int) -> RGBA:
        return self._rng.choice(self.palette)


class FrequencyColorScheme:
    """
    Interpolates from `low` to `high` with ratio f / (f + 10), so frequent
    words approach `high` without ever reaching it.
    """

    def __init__(self, low: RGBA, high: RGBA):
        self.low = low
        self.high = high

    def color_for(self, tag: WordTag, index: int, total: int) -> RGBA:
        ratio = tag.frequency / (tag.frequency + 10)
        r, g, b = (
            int(lo + (hi - lo) * ratio)
            for lo, hi in zip(self.low[:3], self.high[:3])
        )
        return (r, g, b, 255)


LIGHT_GOLDENROD_YELLOW: RGBA = (250, 250, 210, 255)
ORANGE: RGBA = (255, 165, 0, 255)

COLOR_SCHEMES = ("Random", "Frequency")


def make_color_scheme(name: str, seed: Optional[int] = None) -> ColorScheme:
    """Scheme by CLI name; unknown names fall back to Random."""
    if name.lower() == "frequency":
        return FrequencyColorScheme(LIGHT_GOLDENROD_YELLOW, ORANGE)
    return RandomColorScheme(seed)


# ---------------------------------------------------------------------------
# Building and arranging tags
# ---------------------------------------------------------------------------

def build_tags(
    frequencies: Dict[str, int],
    min_font_size: int,
    max_font_size: int,
    color_scheme: ColorScheme,
    font_size_fn: Callable[[int, int, int], int] = linear_font_size,
) -> List[WordTag]:
    """Tags in descending frequency order; ties keep their input order."""
    if min_font_size <= 0 or max_font_size < min_font_size:
        raise ValueError(
            f"Invalid font size range {min_font_size}-{max_font_size}"
        )

    ordered = sorted(frequencies.items(), key=lambda item: item[1], reverse=True)
    total = len(ordered)

    tags = []
    for index, (word, frequency) in enumerate(ordered):
        tag = WordTag(word, frequency, font_size_fn(frequency, min_font_size, max_font_size))
        tag.color = color_scheme.color_for(tag, index, total)
        tags.append(tag)
    return tags


class TextMeasurer(Protocol):
    def measure(self, text: str, font_size: int) -> Size:
        ...


def arrange_tags(
    tags: Sequence[WordTag],
    layouter: CircularCloudLayouter,
    measurer: TextMeasurer,
) -> List[WordTag]:
    """
    Place every tag, most frequent first, and set its rectangle.
    Raises PlacementExhaustedError naming the word that did not fit.
    """
    arranged = []
    for tag in sorted(tags, key=lambda t: t.frequency, reverse=True):
        size = measurer.measure(tag.text, tag.font_size)
        try:
            tag.rectangle = layouter.put_next_rectangle(size)
        except PlacementExhaustedError as exc:
            raise PlacementExhaustedError(f"Failed to arrange tag '{tag.text}': {exc}") from exc
        arranged.append(tag)
    return arranged
