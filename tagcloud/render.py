"""
Rendering: measuring words, drawing the cloud and writing image files.

Text is measured and drawn with Pillow (TrueType fonts); the finished canvas
is a BGR uint8 NumPy array handed to OpenCV for debug overlays and encoding.
"""

import math
import os
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import cv2
import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .colors import RGBA
from .exceptions import CloudBoundsError
from .geometry import Rectangle, Size, bounding_box
from .tags import WordTag

INDIGO: RGBA = (75, 0, 130, 255)

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
AUTO_SIZE_PADDING = 200

# Extensions OpenCV encodes directly; anything else is written as PNG bytes
SUPPORTED_EXTENSIONS = (".png", ".jpg", ".jpeg", ".bmp", ".tif", ".tiff")


# ---------------------------------------------------------------------------
# Text measurement
# ---------------------------------------------------------------------------

class PillowTextMeasurer:
    """
    Measures words with a TrueType font family. When the family cannot be
    found on the system, Pillow's bundled scalable font is used instead and
    `used_fallback` is set.
    """

    def __init__(self, font_family: str = "Arial"):
        self.font_family = font_family
        self.used_fallback = False
        self._fonts: Dict[int, ImageFont.ImageFont] = {}

    def _candidates(self) -> List[str]:
        name = self.font_family
        if os.path.splitext(name)[1]:
            return [name]
        squashed = name.replace(" ", "")
        return [name, f"{name}.ttf", f"{squashed}.ttf", f"{squashed.lower()}.ttf"]

    def _load_font(self, size: int):
        for candidate in self._candidates():
            try:
                return ImageFont.truetype(candidate, size)
            except OSError:
                continue
        self.used_fallback = True
        return ImageFont.load_default(size=size)

    def font(self, size: int):
        if size not in self._fonts:
            self._fonts[size] = self._load_font(size)
        return self._fonts[size]

    def measure(self, text: str, font_size: int) -> Size:
        _, _, right, bottom = self.font(font_size).getbbox(text)
        return Size(max(1, math.ceil(right)), max(1, math.ceil(bottom)))


# ---------------------------------------------------------------------------
# Bounds check
# ---------------------------------------------------------------------------

def check_bounds(rectangles: Iterable[Rectangle], canvas_size: Tuple[int, int]) -> None:
    """Raise CloudBoundsError if the rectangles do not fit in [0, W) x [0, H)."""
    box = bounding_box(rectangles)
    if box is None:
        return
    W, H = canvas_size
    if box.left < 0 or box.top < 0 or box.right > W or box.bottom > H:
        raise CloudBoundsError(
            f"Tag cloud spans ({box.left},{box.top})-({box.right},{box.bottom}) "
            f"and does not fit into the {W}x{H} canvas; "
            f"increase the image size or reduce the font sizes"
        )


# ---------------------------------------------------------------------------
# Drawing
# ---------------------------------------------------------------------------

def optimal_image_size(rectangles: Sequence[Rectangle]) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """
    Canvas size that holds the cloud with padding, and the (dx, dy) offset
    that centers the cloud on it.
    """
    box = bounding_box(rectangles)
    if box is None:
        return (DEFAULT_WIDTH, DEFAULT_HEIGHT), (0, 0)

    W = max(DEFAULT_WIDTH, box.width + AUTO_SIZE_PADDING)
    H = max(DEFAULT_HEIGHT, box.height + AUTO_SIZE_PADDING)
    offset = ((W - box.width) // 2 - box.x, (H - box.height) // 2 - box.y)
    return (W, H), offset


def render_cloud(
    tags: Sequence[WordTag],
    measurer: PillowTextMeasurer,
    image_size: Optional[Tuple[int, int]] = None,
    background: RGBA = INDIGO,
) -> Tuple[np.ndarray, Tuple[int, int]]:
    """
    Draw every arranged tag at its rectangle's top-left corner.
    Returns (BGR canvas, offset applied to the layout coordinates).
    """
    placed = [t for t in tags if t.rectangle is not None]

    if image_size is None:
        image_size, offset = optimal_image_size([t.rectangle for t in placed])
    else:
        offset = (0, 0)

    W, H = image_size
    if W <= 0 or H <= 0:
        raise ValueError(f"Image size must be positive, got {W}x{H}")

    img = Image.new("RGB", (W, H), tuple(background[:3]))
    draw = ImageDraw.Draw(img)
    for tag in placed:
        rect = tag.rectangle
        draw.text(
            (rect.x + offset[0], rect.y + offset[1]),
            tag.text,
            font=measurer.font(tag.font_size),
            fill=tuple(tag.color[:3]),
        )

    canvas = cv2.cvtColor(np.asarray(img), cv2.COLOR_RGB2BGR)
    return canvas, offset


def render_debug_boxes(
    canvas: np.ndarray,
    rectangles: Iterable[Rectangle],
    offset: Tuple[int, int] = (0, 0),
    color: Tuple[int, int, int] = (0, 255, 0),
) -> np.ndarray:
    """Copy of the canvas with every rectangle outlined (BGR color)."""
    out = canvas.copy()
    H, W = out.shape[:2]
    dx, dy = offset
    for rect in rectangles:
        x1 = max(0, rect.left + dx)
        y1 = max(0, rect.top + dy)
        x2 = min(W - 1, rect.right + dx - 1)
        y2 = min(H - 1, rect.bottom + dy - 1)
        if x2 < x1 or y2 < y1:
            continue
        cv2.rectangle(out, (x1, y1), (x2, y2), color, 1)
    return out


# ---------------------------------------------------------------------------
# Saving
# ---------------------------------------------------------------------------

def save_image(canvas: np.ndarray, file_name: str, output_dir: str = "out") -> str:
    """
    Write the canvas to output_dir/file_name and return the absolute path.
    The encoder follows the extension; unknown extensions get PNG data.
    """
    if not file_name or not file_name.strip():
        raise ValueError("File name cannot be empty")

    path = os.path.join(output_dir, file_name)
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

    ext = os.path.splitext(file_name)[1].lower()
    encode_ext = ext if ext in SUPPORTED_EXTENSIONS else ".png"

    ok, buf = cv2.imencode(encode_ext, canvas)
    if not ok:
        raise IOError(f"Could not encode image as {encode_ext}: {path}")
    buf.tofile(path)

    return os.path.abspath(path)
