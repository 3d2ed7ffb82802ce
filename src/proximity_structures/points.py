# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Point set ownership and editing.

This module provides the initial seed layout and a ``PointSet`` that owns
the ordered points and their id counter, so that the derived-structure
computation only ever sees immutable snapshots.
"""

import math
from typing import List, Optional, Tuple, Union

import numpy as np

from .config import HIT_DISTANCE_MULTIPLIER, INITIAL_POINT_MARGIN, POINT_RADIUS, settings
from .derived import compute_derived_structures
from .geometry.primitives import clamp, pseudo_random
from .model import DerivedStructures, GraphMode, Point


# Normalized [0-1] positions of the default points, scaled to the canvas
INITIAL_SEEDS: List[Tuple[float, float]] = [
    (0.18, 0.25),
    (0.38, 0.18),
    (0.62, 0.22),
    (0.82, 0.34),
    (0.22, 0.54),
    (0.46, 0.46),
    (0.68, 0.52),
    (0.14, 0.78),
    (0.44, 0.76),
    (0.74, 0.78),
]


def create_initial_points(width: float, height: float) -> List[Point]:
    """
    Create the default points with reproducible jitter.

    :param width: Canvas width.
    :type width: float
    :param height: Canvas height.
    :type height: float
    :return: Points with ids 0..9, kept INITIAL_POINT_MARGIN away from the edges.
    :rtype: List[Point]
    """
    margin = INITIAL_POINT_MARGIN
    points = []
    for index, (u, v) in enumerate(INITIAL_SEEDS):
        jitter_x = (pseudo_random(index) - 0.5) * 0.12
        jitter_y = (pseudo_random(index + 42) - 0.5) * 0.12
        points.append(Point(
            id=index,
            x=clamp((u + jitter_x) * width, margin, width - margin),
            y=clamp((v + jitter_y) * height, margin, height - margin),
        ))
    return points


class PointSet:
    """
    Ordered, editable point set with stable ids.

    Ids come from a counter that only increases, so an id is never handed
    out twice even after points are removed.

    :param width: Canvas width bounding point moves.
    :type width: float
    :param height: Canvas height bounding point moves.
    :type height: float
    :param points: Initial points; the id counter starts after their largest id.
    :type points: Optional[List[Point]]
    """

    def __init__(self, width: float, height: float,
                 points: Optional[List[Point]] = None):
        self.width = float(width)
        self.height = float(height)
        self._points: List[Point] = [p.copy() for p in (points or [])]
        self._next_id = max((p.id for p in self._points), default=-1) + 1

    @classmethod
    def initial(cls, width: Optional[float] = None,
                height: Optional[float] = None) -> "PointSet":
        """Point set seeded with :func:`create_initial_points`."""
        width = settings.default_width if width is None else width
        height = settings.default_height if height is None else height
        return cls(width, height, create_initial_points(width, height))

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index].copy()

    @property
    def next_id(self) -> int:
        return self._next_id

    def add(self, x: float, y: float) -> Point:
        """
        Append a point with a fresh id.

        :return: Copy of the new point.
        :rtype: Point
        """
        point = Point(self._next_id, x, y)
        self._next_id += 1
        self._points.append(point)
        return point.copy()

    def move(self, index: int, x: float, y: float) -> Point:
        """
        Move a point, clamped to the canvas.

        :raises IndexError: If ``index`` is out of range.
        """
        point = self._points[index]
        point.x = clamp(float(x), 0.0, self.width)
        point.y = clamp(float(y), 0.0, self.height)
        return point.copy()

    def remove(self, index: int) -> Point:
        """
        Remove a point; its id is not reused.

        :raises IndexError: If ``index`` is out of range.
        """
        return self._points.pop(index)

    def resize(self, count: int,
               rng: Optional[np.random.Generator] = None) -> None:
        """
        Grow or shrink the set to ``count`` points.

        Missing points are drawn uniformly over the canvas and get fresh
        ids; excess points are dropped from the end.

        :param count: Target number of points.
        :type count: int
        :param rng: NumPy random generator for reproducibility.
        :type rng: Optional[np.random.Generator]
        :raises ValueError: If ``count`` is negative.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        if count <= len(self._points):
            del self._points[count:]
            return

        if rng is None:
            rng = np.random.default_rng()

        missing = count - len(self._points)
        xs = rng.uniform(0.0, self.width, missing)
        ys = rng.uniform(0.0, self.height, missing)
        for x, y in zip(xs, ys):
            self.add(float(x), float(y))

    def rescale(self, width: float, height: float) -> None:
        """
        Resize the canvas, scaling all points proportionally.

        If either scale factor is not finite (e.g. previous size 0), only the
        bounds are updated.
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            scale_x = np.float64(width) / self.width
            scale_y = np.float64(height) / self.height

        if math.isfinite(scale_x) and math.isfinite(scale_y):
            for point in self._points:
                point.x *= float(scale_x)
                point.y *= float(scale_y)

        self.width = float(width)
        self.height = float(height)

    def find_at(self, x: float, y: float,
                hit_distance: float = POINT_RADIUS * HIT_DISTANCE_MULTIPLIER) -> int:
        """
        Index of the topmost point within ``hit_distance`` of (x, y).

        Later points are drawn on top, so the search runs from the end.

        :return: Point index, or -1 if nothing is hit.
        :rtype: int
        """
        for index in range(len(self._points) - 1, -1, -1):
            point = self._points[index]
            if math.hypot(point.x - x, point.y - y) <= hit_distance:
                return index
        return -1

    def snapshot(self) -> Tuple[Point, ...]:
        """Immutable copy of the current points, in order."""
        return tuple(p.copy() for p in self._points)

    def compute(self, alpha: float, mode: Union[GraphMode, str]) -> DerivedStructures:
        """Run :func:`compute_derived_structures` on a snapshot of this set."""
        return compute_derived_structures(self.snapshot(), self.width, self.height, alpha, mode)
