"""Planar geometry helpers for the abstract dispatch plane."""

from __future__ import annotations

import math
import random

from shapely.geometry import Point, Polygon, box

MAX_SAMPLE_ATTEMPTS = 1000


def hinterland_region(bounds: tuple[float, float, float, float]) -> Polygon:
    """Return the rectangle orders are drawn from as a shapely polygon."""

    min_x, min_y, max_x, max_y = bounds
    return box(min_x, min_y, max_x, max_y)


def sample_point(region: Polygon, rng: random.Random) -> Point:
    """Draw a point uniformly from ``region`` by rejection within its bounds.

    For the rectangular hinterland the first draw always lands inside.
    """

    min_x, min_y, max_x, max_y = region.bounds
    for _ in range(MAX_SAMPLE_ATTEMPTS):
        point = Point(rng.uniform(min_x, max_x), rng.uniform(min_y, max_y))
        if region.covers(point):
            return point
    raise ValueError(f"Could not sample a point inside region after {MAX_SAMPLE_ATTEMPTS} attempts")


def planar_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two plane coordinates."""

    return Point(x1, y1).distance(Point(x2, y2))


def haul_distance_km(plane_distance: float, *, scale: float, offset_km: int) -> int:
    """Rescale a plane distance into whole kilometres with a minimum haul offset."""

    return int(math.floor(plane_distance * scale)) + offset_km
