"""
Tag Cloud Packer
================
Lays out words of a text as a dense, non-overlapping cloud around a center:
  - Golden-angle spiral search for a free spot per word
  - Greedy compaction of each word toward the center
  - Pillow text rendering, OpenCV image output

Dependencies: pip install opencv-python numpy Pillow scipy
"""

from .exceptions import (
    CloudBoundsError,
    ColorParseError,
    InvalidSizeError,
    PlacementExhaustedError,
    TagCloudError,
)
from .geometry import Point, Rectangle, Size
from .layouter import CircularCloudLayouter
from .spiral import SpiralPointGenerator

__version__ = "0.1.0"
