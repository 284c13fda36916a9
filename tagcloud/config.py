from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .colors import RGBA
from .geometry import Point
from .layouter import DEFAULT_PLACEMENT_BUDGET
from .render import INDIGO
from .spiral import DEFAULT_RADIUS_STEP_FACTOR


@dataclass
class CloudConfig:
    # Input text file, one word per line
    input_file: str = ""

    # Output image name, written inside output_dir
    output_file: str = "tagcloud.png"
    output_dir: str = "out"

    # TrueType font family or file; falls back to Pillow's default font
    font_family: str = "Arial"
    min_font_size: int = 20
    max_font_size: int = 70

    # Canvas size (W, H). None = size the image to the cloud.
    # A fixed size also enables the bounds check.
    image_size: Optional[Tuple[int, int]] = (1200, 900)

    background_color: RGBA = INDIGO

    # "Random" or "Frequency"
    color_scheme: str = "Random"

    # Cloud center in canvas coordinates. None = center of the image.
    center: Optional[Tuple[int, int]] = None

    # Empty list = built-in English stop words
    stop_words: List[str] = field(default_factory=list)
    to_lower: bool = True

    # Seed for the random color scheme (None = random each run)
    seed: Optional[int] = None

    # Layouter tuning
    radius_step_factor: float = DEFAULT_RADIUS_STEP_FACTOR
    placement_budget: int = DEFAULT_PLACEMENT_BUDGET

    # Debug: also save a copy with every word's rectangle outlined
    debug_output: bool = False

    def resolved_center(self) -> Point:
        if self.center is not None:
            return Point(*self.center)
        if self.image_size is not None:
            W, H = self.image_size
            return Point(W // 2, H // 2)
        return Point(0, 0)
