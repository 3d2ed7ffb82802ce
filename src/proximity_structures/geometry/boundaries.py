# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Alpha-shape and alpha-complex construction.

Delaunay triangles are filtered by circumradius; the surviving triangles
form the alpha complex, and the edges they do not share form the alpha
shape boundary.
"""

import math
from collections import Counter
from typing import List

from ..model import AlphaData, Edge, Triangle
from ..utils.helpers import as_coordinates
from .primitives import circumradius
from .tessellation import Triangulation


def compute_alpha_data(points, triangulation: Triangulation, alpha: float) -> AlphaData:
    """
    Filter triangles by circumradius and classify their edges.

    A triangle qualifies when its circumradius is finite and ``<= alpha``.
    Records with missing, out-of-range or repeated vertex indices are
    skipped.

    :param points: Sequence of points or (N, 2) array, indexed by the
                   triangulation.
    :param triangulation: Triangulation in half-edge form.
    :type triangulation: Triangulation
    :param alpha: Circumradius threshold (same units as the coordinates).
    :type alpha: float
    :return: Qualifying triangles, all of their edges, and the edges that
             belong to exactly one of them.
    :rtype: AlphaData
    :raises ValueError: If ``alpha`` is negative or NaN.
    """
    if math.isnan(alpha) or alpha < 0:
        raise ValueError(f"alpha must be a non-negative number, got {alpha!r}")

    coords = as_coordinates(points)
    n = len(coords)
    flat = triangulation.triangles

    alpha_triangles: List[Triangle] = []
    edge_count: Counter = Counter()

    for index in range(0, len(flat), 3):
        if index + 2 >= len(flat):
            break
        i0, i1, i2 = int(flat[index]), int(flat[index + 1]), int(flat[index + 2])

        if not (0 <= i0 < n and 0 <= i1 < n and 0 <= i2 < n):
            continue
        if i0 == i1 or i1 == i2 or i2 == i0:
            continue

        (x0, y0), (x1, y1), (x2, y2) = coords[i0], coords[i1], coords[i2]
        radius = circumradius(x0, y0, x1, y1, x2, y2)
        if not math.isfinite(radius) or radius > alpha:
            continue

        alpha_triangles.append((i0, i1, i2))
        edge_count[Edge.of(i0, i1)] += 1
        edge_count[Edge.of(i1, i2)] += 1
        edge_count[Edge.of(i2, i0)] += 1

    all_edges = list(edge_count)
    boundary_edges = [edge for edge, count in edge_count.items() if count == 1]

    return AlphaData(
        triangles=alpha_triangles,
        all_edges=all_edges,
        boundary_edges=boundary_edges,
    )
