"""
Layout diagnostics: how dense and balanced a finished cloud is.

  - density: placed area over the area of the circle (around the cloud
    center) that reaches the farthest rectangle corner
  - quadrant counts of rectangle centers
  - nearest edge-to-edge gap per rectangle (vectorized, all pairs)
  - radius of the largest empty disc inside the bounding circle
    (Euclidean distance transform of the free pixels)
"""

import math
from typing import Dict, List, Sequence

import numpy as np
from scipy.ndimage import distance_transform_edt

from .geometry import Point, Rectangle


def bounding_radius(rectangles: Sequence[Rectangle], center: Point) -> float:
    """Distance from the center to the farthest rectangle corner."""
    radius = 0.0
    for rect in rectangles:
        for corner in rect.corners():
            radius = max(radius, math.hypot(corner.x - center.x, corner.y - center.y))
    return radius


def quadrant_counts(rectangles: Sequence[Rectangle], center: Point) -> List[int]:
    """
    Rectangle centers per quadrant, in screen coordinates:
    [top-right, bottom-right, bottom-left, top-left].
    Centers on the axes go to the right / top side.
    """
    counts = [0, 0, 0, 0]
    for rect in rectangles:
        c = rect.center()
        if c.x >= center.x and c.y <= center.y:
            counts[0] += 1
        elif c.x >= center.x and c.y > center.y:
            counts[1] += 1
        elif c.x < center.x and c.y > center.y:
            counts[2] += 1
        else:
            counts[3] += 1
    return counts


def nearest_gaps(rectangles: Sequence[Rectangle]) -> np.ndarray:
    """Per rectangle, the edge-to-edge distance to its nearest neighbour."""
    n = len(rectangles)
    if n < 2:
        return np.zeros(0, dtype=np.float64)

    xs = np.array([r.x for r in rectangles], dtype=np.float64)
    ys = np.array([r.y for r in rectangles], dtype=np.float64)
    ws = np.array([r.width for r in rectangles], dtype=np.float64)
    hs = np.array([r.height for r in rectangles], dtype=np.float64)

    gap_x = np.maximum(xs[None, :] - (xs[:, None] + ws[:, None]), 0) + \
            np.maximum(xs[:, None] - (xs[None, :] + ws[None, :]), 0)
    gap_y = np.maximum(ys[None, :] - (ys[:, None] + hs[:, None]), 0) + \
            np.maximum(ys[:, None] - (ys[None, :] + hs[None, :]), 0)
    edge_dist = np.sqrt(gap_x * gap_x + gap_y * gap_y)
    np.fill_diagonal(edge_dist, np.inf)

    return edge_dist.min(axis=1)


def largest_hole_radius(rectangles: Sequence[Rectangle], center: Point, radius: float) -> float:
    """
    Radius (px) of the biggest empty disc whose center lies inside the
    bounding circle. Rectangles and everything outside the circle count
    as occupied.
    """
    r = int(math.ceil(radius))
    if r <= 0 or not rectangles:
        return 0.0

    size = 2 * r + 1
    occupied = np.zeros((size, size), dtype=bool)

    ys, xs = np.ogrid[-r:r + 1, -r:r + 1]
    occupied[xs * xs + ys * ys > radius * radius] = True

    for rect in rectangles:
        x1 = max(0, rect.left - center.x + r)
        y1 = max(0, rect.top - center.y + r)
        x2 = min(size, rect.right - center.x + r)
        y2 = min(size, rect.bottom - center.y + r)
        if x2 > x1 and y2 > y1:
            occupied[y1:y2, x1:x2] = True

    free = ~occupied
    if not free.any():
        return 0.0
    return float(distance_transform_edt(free).max())


def measure_layout(rectangles: Sequence[Rectangle], center: Point) -> Dict[str, object]:
    rects = list(rectangles)
    total_area = sum(r.area for r in rects)
    radius = bounding_radius(rects, center)
    circle_area = math.pi * radius * radius
    gaps = nearest_gaps(rects)

    return {
        "rectangles": len(rects),
        "total_area": total_area,
        "bounding_radius": round(radius, 1),
        "density": round(total_area / circle_area, 3) if circle_area > 0 else 0.0,
        "quadrants": quadrant_counts(rects, center),
        "min_gap": round(float(gaps.min()), 1) if gaps.size else 0.0,
        "mean_gap": round(float(gaps.mean()), 1) if gaps.size else 0.0,
        "largest_hole_radius": round(largest_hole_radius(rects, center, radius), 1),
    }
