"""
Delaunay triangulation and half-edge utilities.

This module wraps ``scipy.spatial.Delaunay`` into a flat half-edge
representation (one triangle = three consecutive slots) and extracts the
unique edges of a triangulation.
"""

from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

import numpy as np
from scipy.spatial import Delaunay, QhullError

from ..model import Edge
from ..utils.helpers import as_coordinates, get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Triangulation:
    """
    Triangle connectivity in half-edge form.

    ``triangles[3t:3t+3]`` are the vertex indices of triangle ``t``.
    Half-edge ``e`` runs from ``triangles[e]`` to
    ``triangles[next_halfedge(e)]``; ``halfedges[e]`` is the index of the
    opposite half-edge in the neighboring triangle, or -1 on the hull.
    """

    triangles: np.ndarray
    halfedges: np.ndarray

    @classmethod
    def empty(cls) -> "Triangulation":
        return cls(np.empty(0, dtype=np.int64), np.empty(0, dtype=np.int64))

    @classmethod
    def from_arrays(cls, triangles, halfedges) -> "Triangulation":
        """
        Wrap externally produced triangle and half-edge arrays.

        :param triangles: Flat vertex indices, three per triangle.
        :param halfedges: Opposite half-edge per slot, negative on the hull.
        :return: Triangulation view of the arrays.
        :rtype: Triangulation
        """
        return cls(np.asarray(triangles, dtype=np.int64).ravel(),
                   np.asarray(halfedges, dtype=np.int64).ravel())

    @property
    def triangle_count(self) -> int:
        return len(self.triangles) // 3


def next_halfedge(index: int) -> int:
    """Next half-edge within the same triangle."""
    return index - 2 if index % 3 == 2 else index + 1


def _build_halfedges(triangles: np.ndarray) -> np.ndarray:
    # Opposite of directed edge (p, q) is the slot holding (q, p)
    slots: Dict[Tuple[int, int], int] = {}
    for e in range(len(triangles)):
        slots[(int(triangles[e]), int(triangles[next_halfedge(e)]))] = e

    halfedges = np.full(len(triangles), -1, dtype=np.int64)
    for (p, q), e in slots.items():
        halfedges[e] = slots.get((q, p), -1)
    return halfedges


def compute_delaunay(points) -> Triangulation:
    """
    Compute the Delaunay triangulation of a point set.

    Degenerate inputs (fewer than three points, all points collinear or
    coincident) produce an empty triangulation rather than an error.

    :param points: Sequence of points or (N, 2) array of coordinates.
    :return: Triangulation in half-edge form.
    :rtype: Triangulation
    """
    coords = as_coordinates(points)
    if len(coords) < 3:
        return Triangulation.empty()

    try:
        tri = Delaunay(coords)
    except QhullError as exc:
        logger.debug("Delaunay triangulation skipped", points=len(coords), reason=str(exc).splitlines()[0])
        return Triangulation.empty()

    triangles = tri.simplices.astype(np.int64).ravel()
    return Triangulation(triangles, _build_halfedges(triangles))


def collect_delaunay_edges(triangulation: Triangulation) -> List[Edge]:
    """
    Collect the unique edges of a triangulation.

    Walks every half-edge once, skipping a slot when its opposite has already
    been visited. Edges with a missing or repeated endpoint are dropped.

    :param triangulation: Triangulation in half-edge form.
    :type triangulation: Triangulation
    :return: Canonical edges in first-seen order.
    :rtype: List[Edge]
    """
    triangles = triangulation.triangles
    halfedges = triangulation.halfedges
    n_slots = len(triangles)

    seen: Set[Edge] = set()
    edges: List[Edge] = []

    for e in range(len(halfedges)):
        opposite = halfedges[e]
        if 0 <= opposite < e:
            continue

        nxt = next_halfedge(e)
        if e >= n_slots or nxt >= n_slots:
            continue
        p = int(triangles[e])
        q = int(triangles[nxt])
        if p == q:
            continue

        edge = Edge.of(p, q)
        if edge in seen:
            continue
        seen.add(edge)
        edges.append(edge)

    return edges


def delaunay_adjacency(points) -> List[Set[int]]:
    """
    Build the Delaunay neighbor sets of a point set.

    :param points: Sequence of points or (N, 2) array of coordinates.
    :return: List of neighbor sets, one per point (index-aligned).
    :rtype: List[Set[int]]
    """
    coords = as_coordinates(points)
    neighbors = [set() for _ in range(len(coords))]

    for a, b in collect_delaunay_edges(compute_delaunay(coords)):
        neighbors[a].add(b)
        neighbors[b].add(a)

    return neighbors
