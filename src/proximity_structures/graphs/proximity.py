# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Proximity graphs over a point set.

Nearest-neighbor edges are computed over all points. The Gabriel and
relative-neighborhood filters work on a candidate edge list; both graphs
are subgraphs of the Delaunay triangulation, so Delaunay edges are the
usual candidates.

Boundary cases are biased toward keeping an edge: a third point only
rejects an edge when it is inside the test region by more than EPSILON.
"""

from typing import Iterable, List, Set, Tuple

import numpy as np

from ..config import EPSILON
from ..model import Edge
from ..utils.helpers import as_coordinates


def compute_nearest_neighbor_edges(points) -> List[Edge]:
    """
    Connect every point to its nearest neighbor.

    On equal distances the neighbor with the lower index wins. A mutual
    nearest-neighbor pair yields a single edge.

    :param points: Sequence of points or (N, 2) array of coordinates.
    :return: Canonical edges, in order of first discovery.
    :rtype: List[Edge]
    """
    coords = as_coordinates(points)
    n = len(coords)
    if n < 2:
        return []

    seen: Set[Edge] = set()
    edges: List[Edge] = []
    for i in range(n):
        diff = coords - coords[i]
        d2 = np.einsum('ij,ij->i', diff, diff)
        d2[i] = np.inf
        nearest = int(np.argmin(d2))

        edge = Edge.of(i, nearest)
        if edge not in seen:
            seen.add(edge)
            edges.append(edge)

    return edges


def _others_mask(n: int, a: int, b: int) -> np.ndarray:
    mask = np.ones(n, dtype=bool)
    mask[a] = False
    mask[b] = False
    return mask


def compute_gabriel_edges(points, candidate_edges: Iterable[Tuple[int, int]]) -> List[Edge]:
    """
    Keep the candidate edges whose diametral circle holds no other point.

    :param points: Sequence of points or (N, 2) array of coordinates.
    :param candidate_edges: Index pairs to test, typically Delaunay edges.
    :type candidate_edges: Iterable[Tuple[int, int]]
    :return: Gabriel edges in candidate order.
    :rtype: List[Edge]
    """
    coords = as_coordinates(points)
    n = len(coords)
    result: List[Edge] = []

    for a, b in candidate_edges:
        pa, pb = coords[a], coords[b]
        mid = 0.5 * (pa + pb)
        ab = pa - pb
        radius_sq = float(ab @ ab) / 4.0

        diff = coords - mid
        d2 = np.einsum('ij,ij->i', diff, diff)
        inside = d2[_others_mask(n, a, b)] < radius_sq - EPSILON

        if not inside.any():
            result.append(Edge.of(a, b))

    return result


def compute_relative_neighborhood_edges(points,
                                        candidate_edges: Iterable[Tuple[int, int]]) -> List[Edge]:
    """
    Keep the candidate edges with an empty lune.

    An edge (a, b) is rejected when some third point k satisfies
    ``max(|ak|, |bk|) < |ab| - EPSILON``.

    :param points: Sequence of points or (N, 2) array of coordinates.
    :param candidate_edges: Index pairs to test, typically Delaunay edges.
    :type candidate_edges: Iterable[Tuple[int, int]]
    :return: Relative neighborhood graph edges in candidate order.
    :rtype: List[Edge]
    """
    coords = as_coordinates(points)
    n = len(coords)
    result: List[Edge] = []

    for a, b in candidate_edges:
        pa, pb = coords[a], coords[b]
        ab = float(np.hypot(*(pa - pb)))

        ak = np.hypot(coords[:, 0] - pa[0], coords[:, 1] - pa[1])
        bk = np.hypot(coords[:, 0] - pb[0], coords[:, 1] - pb[1])
        closer = np.maximum(ak, bk)[_others_mask(n, a, b)] < ab - EPSILON

        if not closer.any():
            result.append(Edge.of(a, b))

    return result
