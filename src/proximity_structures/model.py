# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Data types shared by the geometry and graph modules.

All index-based results (edges, triangles, cells) refer to points by their
position in the point sequence passed to a computation, not by ``Point.id``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Tuple, Union


class Point:
    """
    A movable point with a stable identity.

    :param id: Stable integer identity, never reused while the point is alive.
    :type id: int
    :param x: X coordinate.
    :type x: float
    :param y: Y coordinate.
    :type y: float
    """

    __slots__ = ('_id', 'x', 'y')

    def __init__(self, id: int, x: float, y: float):
        self._id = int(id)
        self.x = float(x)
        self.y = float(y)

    @property
    def id(self) -> int:
        return self._id

    def copy(self) -> "Point":
        return Point(self._id, self.x, self.y)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (self._id, self.x, self.y) == (other._id, other.x, other.y)

    def __repr__(self):
        return f"Point(id={self._id}, x={self.x!r}, y={self.y!r})"


class Edge(NamedTuple):
    """Unordered pair of point indices, stored smaller index first."""

    a: int
    b: int

    @classmethod
    def of(cls, p: int, q: int) -> "Edge":
        """Canonical edge for the pair ``(p, q)`` in either order."""
        p, q = int(p), int(q)
        return cls(p, q) if p <= q else cls(q, p)


Triangle = Tuple[int, int, int]
Polygon = List[Tuple[float, float]]


@dataclass
class AlphaData:
    """Triangles and edges surviving an alpha (circumradius) filter."""

    triangles: List[Triangle] = field(default_factory=list)
    # Edges of any qualifying triangle (alpha-complex)
    all_edges: List[Edge] = field(default_factory=list)
    # Edges of exactly one qualifying triangle (alpha-shape)
    boundary_edges: List[Edge] = field(default_factory=list)


@dataclass
class DerivedStructures:
    """
    Everything derived from one point set for one mode.

    ``voronoi_cells`` has one entry per point. In ``voronoi-bruteforce`` mode
    the entries are integer pixel groups instead of polygons.
    """

    voronoi_cells: List[list] = field(default_factory=list)
    graph_edges: List[Edge] = field(default_factory=list)
    alpha_triangles: List[Triangle] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "DerivedStructures":
        return cls()


class GraphMode(str, Enum):
    """Which derived structure a computation produces."""

    VORONOI = "voronoi"
    VORONOI_BRUTEFORCE = "voronoi-bruteforce"
    ALPHA_SHAPE = "alpha-shape"
    ALPHA_COMPLEX = "alpha-complex"
    NN_CRUST = "nn-crust"
    GABRIEL = "gabriel"
    RNG = "rng"
    MST = "mst"

    @classmethod
    def parse(cls, value: Union["GraphMode", str]) -> "GraphMode":
        """
        Normalize a mode given as a member or its string value.

        :raises ValueError: If ``value`` names no mode.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            valid = ', '.join(m.value for m in cls)
            raise ValueError(f"Unknown graph mode {value!r} (expected one of: {valid})") from None
