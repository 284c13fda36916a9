"""
Circular cloud layouter
=======================
Places rectangles one at a time around a fixed center so that none overlap:
  - Candidate centers come from a golden-angle spiral around the center
  - The spiral is sampled more finely as smaller rectangles arrive
  - Each accepted rectangle is then slid greedily toward the center

One layouter instance belongs to one cloud. It is not thread-safe and must
not be shared between independent jobs.
"""

import sys
from typing import List, Tuple

from .exceptions import InvalidSizeError, PlacementExhaustedError
from .geometry import Point, Rectangle, Size, intersects_any
from .spiral import DEFAULT_RADIUS_STEP_FACTOR, SpiralCursor, SpiralPointGenerator

DEFAULT_PLACEMENT_BUDGET = 10_000


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _clamped_step(distance: int, step: int) -> int:
    """Signed move of at most `step` that never passes beyond `distance`."""
    return _sign(distance) * min(step, abs(distance))


class CircularCloudLayouter:
    def __init__(
        self,
        center: Point,
        radius_step_factor: float = DEFAULT_RADIUS_STEP_FACTOR,
        placement_budget: int = DEFAULT_PLACEMENT_BUDGET,
    ):
        if placement_budget <= 0:
            raise ValueError(f"placement_budget must be positive, got {placement_budget}")
        self._center = center
        self._spiral = SpiralPointGenerator(center, radius_step_factor)
        self._placement_budget = placement_budget
        self._placed: List[Rectangle] = []
        # No rectangle seen yet: the first request always rescales
        self._min_dimension = sys.maxsize
        self._cursor: SpiralCursor = self._spiral.cursor(self._min_dimension)

    @property
    def center(self) -> Point:
        return self._center

    @property
    def rectangles(self) -> Tuple[Rectangle, ...]:
        return tuple(self._placed)

    @property
    def min_dimension(self) -> int:
        return self._min_dimension

    @property
    def spiral_step(self) -> int:
        return self._cursor.step

    def __len__(self) -> int:
        return len(self._placed)

    def put_next_rectangle(self, size: Size) -> Rectangle:
        """
        Find a free spot for a rectangle of `size`, pull it toward the center
        and record it.

        Raises InvalidSizeError for non-positive dimensions and
        PlacementExhaustedError when the spiral search runs out of budget.
        Neither failure changes the set of placed rectangles.
        """
        if size.width <= 0 or size.height <= 0:
            raise InvalidSizeError(
                f"Rectangle size must have positive dimensions, got {size.width}x{size.height}"
            )

        self._update_min_dimension(size)

        candidate = self._find_free_candidate(size)
        placed = self._compact_towards_center(candidate)

        self._placed.append(placed)
        return placed

    # -----------------------------------------------------------------------
    # Search
    # -----------------------------------------------------------------------

    def _update_min_dimension(self, size: Size) -> None:
        new_min = size.min_dimension
        if new_min >= self._min_dimension:
            return
        self._min_dimension = new_min
        self._cursor = self._spiral.cursor(new_min)

    def _find_free_candidate(self, size: Size) -> Rectangle:
        # Cursor progress is kept on failure so the next call does not
        # re-test the same occupied points.
        for _ in range(self._placement_budget):
            point = self._cursor.next_point()
            candidate = Rectangle.from_center(point, size)
            if not intersects_any(candidate, self._placed):
                return candidate

        raise PlacementExhaustedError(
            f"No free position for a {size.width}x{size.height} rectangle "
            f"after {self._placement_budget} attempts"
        )

    # -----------------------------------------------------------------------
    # Compaction
    # -----------------------------------------------------------------------

    def _compact_towards_center(self, rect: Rectangle) -> Rectangle:
        """
        Greedy hill-climb toward the center: try a diagonal step, then X only,
        then Y only. When all three collide, halve the step; stop once a step
        of 1 px cannot move. Moves never overshoot the center, so the
        distance to it never grows.
        """
        step = max(1, min(rect.width, rect.height) // 10)

        while True:
            rect_center = rect.center()
            dx = self._center.x - rect_center.x
            dy = self._center.y - rect_center.y
            if dx == 0 and dy == 0:
                break

            move_x = _clamped_step(dx, step)
            move_y = _clamped_step(dy, step)

            moved = None
            for mx, my in ((move_x, move_y), (move_x, 0), (0, move_y)):
                if mx == 0 and my == 0:
                    continue
                shifted = rect.translate(mx, my)
                if not intersects_any(shifted, self._placed):
                    moved = shifted
                    break

            if moved is not None:
                rect = moved
                continue

            if step == 1:
                break
            step = max(1, step // 2)

        return rect
