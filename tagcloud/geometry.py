"""
Integer geometry used by the cloud layouter.

All coordinates are canvas pixels with the origin in the top-left corner.
Rectangles that only share an edge or a corner do NOT intersect.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Size:
    width: int
    height: int

    @property
    def min_dimension(self) -> int:
        return min(self.width, self.height)


@dataclass(frozen=True)
class Rectangle:
    x: int          # Top-left x
    y: int          # Top-left y
    width: int
    height: int

    @classmethod
    def from_center(cls, center: Point, size: Size) -> "Rectangle":
        """Rectangle of the given size whose center() is exactly `center`."""
        return cls(
            center.x - size.width // 2,
            center.y - size.height // 2,
            size.width,
            size.height,
        )

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def center(self) -> Point:
        return Point(self.x + self.width // 2, self.y + self.height // 2)

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        return (
            Point(self.left, self.top),
            Point(self.right, self.top),
            Point(self.left, self.bottom),
            Point(self.right, self.bottom),
        )

    def translate(self, dx: int, dy: int) -> "Rectangle":
        return Rectangle(self.x + dx, self.y + dy, self.width, self.height)

    def intersects(self, other: "Rectangle") -> bool:
        # Strict on both axes: touching edges are not an overlap
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )


def intersects_any(rect: Rectangle, others: Iterable[Rectangle]) -> bool:
    for other in others:
        if rect.intersects(other):
            return True
    return False


def bounding_box(rectangles: Iterable[Rectangle]) -> Optional[Rectangle]:
    """Smallest rectangle containing all given rectangles, or None if empty."""
    rects = list(rectangles)
    if not rects:
        return None
    x1 = min(r.left for r in rects)
    y1 = min(r.top for r in rects)
    x2 = max(r.right for r in rects)
    y2 = max(r.bottom for r in rects)
    return Rectangle(x1, y1, x2 - x1, y2 - y1)
