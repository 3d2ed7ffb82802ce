# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Euclidean minimum spanning tree."""

from typing import Iterable, List, Tuple

import numpy as np

from ..model import Edge
from ..utils.helpers import as_coordinates


def compute_minimum_spanning_tree_edges(points) -> List[Edge]:
    """
    Minimum spanning tree by Prim's algorithm with a linear scan.

    O(n²) time, no priority queue. The tree grows from point 0; when several
    unvisited points are equally close, the lowest index is taken first.

    :param points: Sequence of points or (N, 2) array of coordinates.
    :return: n - 1 canonical edges in the order they join the tree; empty for
             fewer than 2 points.
    :rtype: List[Edge]
    """
    coords = as_coordinates(points)
    count = len(coords)
    if count < 2:
        return []

    visited = np.zeros(count, dtype=bool)
    visited[0] = True
    distances = np.hypot(coords[:, 0] - coords[0, 0], coords[:, 1] - coords[0, 1])
    distances[0] = np.inf
    parent = np.zeros(count, dtype=np.int64)

    edges: List[Edge] = []
    for _ in range(1, count):
        candidates = np.where(visited, np.inf, distances)
        best = int(np.argmin(candidates))
        if visited[best] or not np.isfinite(candidates[best]):
            break

        visited[best] = True
        edges.append(Edge.of(best, parent[best]))

        # Relax distances to the remaining points through the new tree point
        d = np.hypot(coords[:, 0] - coords[best, 0], coords[:, 1] - coords[best, 1])
        closer = ~visited & (d < distances)
        distances[closer] = d[closer]
        parent[closer] = best

    return edges


def total_length(points, edges: Iterable[Tuple[int, int]]) -> float:
    """
    Sum of Euclidean edge lengths.

    :param points: Sequence of points or (N, 2) array of coordinates.
    :param edges: Index pairs.
    :type edges: Iterable[Tuple[int, int]]
    :return: Total length.
    :rtype: float
    """
    coords = as_coordinates(points)
    return float(sum(np.hypot(*(coords[a] - coords[b])) for a, b in edges))
