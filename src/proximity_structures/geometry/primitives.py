# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Scalar geometric primitives.

Distances, triangle measures, point-in-polygon and tolerance comparisons,
plus the non-linear slider/radius mapping used to pick an alpha radius.
"""

import math
from typing import Sequence, Tuple

from ..config import EPSILON, SLIDER_RANGES


def clamp(value: float, lo: float, hi: float) -> float:
    """
    Bound a value to [lo, hi].

    :param value: The value to clamp.
    :type value: float
    :param lo: Minimum allowed value.
    :type lo: float
    :param hi: Maximum allowed value.
    :type hi: float
    :return: Clamped value.
    :rtype: float
    """
    return max(lo, min(hi, value))


def pseudo_random(seed: float) -> float:
    """
    Deterministic sine-hash pseudo-random value in [0, 1).

    :param seed: Input seed value.
    :type seed: float
    :return: Pseudo-random float.
    :rtype: float
    """
    x = math.sin(seed * 12.9898) * 43758.5453
    return x - math.floor(x)


def _xy(p) -> Tuple[float, float]:
    if hasattr(p, 'x'):
        return p.x, p.y
    return p[0], p[1]


def distance_squared(a, b) -> float:
    """Squared Euclidean distance; use when only the ordering matters."""
    ax, ay = _xy(a)
    bx, by = _xy(b)
    dx = ax - bx
    dy = ay - by
    return dx * dx + dy * dy


def distance(a, b) -> float:
    """Euclidean distance between two points."""
    ax, ay = _xy(a)
    bx, by = _xy(b)
    return math.hypot(ax - bx, ay - by)


def triangle_area(ax: float, ay: float,
                  bx: float, by: float,
                  cx: float, cy: float) -> float:
    """
    Absolute area of a triangle from the cross-product (shoelace) formula.

    Returns 0 for collinear or coincident vertices.
    """
    return abs(ax * (by - cy) + bx * (cy - ay) + cx * (ay - by)) * 0.5


def circumradius(ax: float, ay: float,
                 bx: float, by: float,
                 cx: float, cy: float) -> float:
    """
    Radius of the circle through the three vertices, R = abc / (4A).

    :return: Circumradius, or ``math.inf`` for a degenerate triangle so that
             it never passes a finite threshold.
    :rtype: float
    """
    a = math.hypot(bx - cx, by - cy)
    b = math.hypot(ax - cx, ay - cy)
    c = math.hypot(ax - bx, ay - by)
    area = triangle_area(ax, ay, bx, by, cx, cy)
    if area == 0:
        return math.inf
    return (a * b * c) / (4.0 * area)


def is_point_in_polygon(px: float, py: float,
                        polygon: Sequence[Tuple[float, float]]) -> bool:
    """
    Ray-casting parity test.

    :param px: X coordinate of the test point.
    :type px: float
    :param py: Y coordinate of the test point.
    :type py: float
    :param polygon: Ordered vertices; the first vertex need not be repeated.
    :type polygon: Sequence[Tuple[float, float]]
    :return: True if the point is inside the polygon.
    :rtype: bool
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i][0], polygon[i][1]
        xj, yj = polygon[j][0], polygon[j][1]
        if (yi > py) != (yj > py) and px < (xj - xi) * (py - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def approx_equal(a: float, b: float) -> bool:
    return abs(a - b) < EPSILON


def approx_zero(value: float) -> bool:
    return abs(value) < EPSILON


def slider_to_radius(t: float) -> float:
    """
    Map a slider value in [0, 1] to an alpha radius in pixels.

    The mapping is piecewise linear over ``SLIDER_RANGES``: fine control at
    small radii, fast coverage of large ones. Values past the last segment
    extrapolate it.

    :param t: Slider value.
    :type t: float
    :return: Radius in pixels.
    :rtype: float
    """
    segments = SLIDER_RANGES.segments
    index = len(segments) - 1
    for i, segment in enumerate(segments):
        if t <= segment.slider_max:
            index = i
            break

    segment = segments[index]
    lo = SLIDER_RANGES.slider_min(index)
    local_t = (t - lo) / (segment.slider_max - lo)
    return segment.radius_min + local_t * (segment.radius_max - segment.radius_min)


def radius_to_slider(r: float) -> float:
    """
    Inverse of :func:`slider_to_radius`.

    :param r: Radius in pixels.
    :type r: float
    :return: Slider value.
    :rtype: float
    """
    segments = SLIDER_RANGES.segments
    index = len(segments) - 1
    for i, segment in enumerate(segments):
        if r <= segment.radius_max:
            index = i
            break

    segment = segments[index]
    lo = SLIDER_RANGES.slider_min(index)
    local_r = (r - segment.radius_min) / (segment.radius_max - segment.radius_min)
    return lo + local_r * (segment.slider_max - lo)
