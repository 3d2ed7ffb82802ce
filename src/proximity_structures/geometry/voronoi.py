# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Voronoi cells and polygon utilities.

Cells are computed with ``scipy.spatial.Voronoi`` and clipped to the canvas
rectangle with shapely. A brute-force pixel raster is provided for the
discrete Voronoi mode.
"""

from typing import List, Sequence, Tuple

import numpy as np
from scipy.spatial import QhullError, Voronoi
from shapely.geometry import MultiPoint, box
from shapely.geometry.polygon import orient

from ..model import Polygon
from ..utils.helpers import as_coordinates, get_logger
from .primitives import is_point_in_polygon

logger = get_logger(__name__)


def polygon_without_duplicate(polygon: Sequence[Tuple[float, float]]) -> List[Tuple[float, float]]:
    """
    Drop a repeated closing vertex from a polygon ring.

    :param polygon: Polygon vertices, possibly closed (last == first).
    :type polygon: Sequence[Tuple[float, float]]
    :return: Open vertex list.
    :rtype: List[Tuple[float, float]]
    """
    polygon = list(polygon)
    if (len(polygon) > 1
            and polygon[0][0] == polygon[-1][0]
            and polygon[0][1] == polygon[-1][1]):
        return polygon[:-1]
    return polygon


def shrink_polygon(polygon: Sequence[Tuple[float, float]],
                   amount: float) -> List[Tuple[float, float]]:
    """
    Move every vertex toward the vertex centroid.

    Vertices closer to the centroid than ``amount`` collapse onto it.

    :param polygon: Polygon vertices.
    :type polygon: Sequence[Tuple[float, float]]
    :param amount: Inward distance in coordinate units.
    :type amount: float
    :return: Shrunk polygon; unchanged if it has fewer than 3 vertices or
             ``amount <= 0``.
    :rtype: List[Tuple[float, float]]
    """
    polygon = list(polygon)
    if len(polygon) < 3 or amount <= 0:
        return polygon

    verts = np.asarray(polygon, dtype=float)
    centroid = verts.mean(axis=0)
    offsets = verts - centroid
    dist = np.hypot(offsets[:, 0], offsets[:, 1])

    shrunk = []
    for (x, y), (dx, dy), d in zip(polygon, offsets, dist):
        if d == 0:
            shrunk.append((x, y))
            continue
        scale = max(0.0, d - amount) / d
        shrunk.append((float(centroid[0] + dx * scale), float(centroid[1] + dy * scale)))
    return shrunk


def _sentinel_sites(coords: np.ndarray, width: float, height: float) -> np.ndarray:
    # Far enough that no location inside the canvas is closer to a sentinel
    # than to any real site, so clipped cells are exact.
    xs = np.concatenate([coords[:, 0], [0.0, width]])
    ys = np.concatenate([coords[:, 1], [0.0, height]])
    cx = 0.5 * (xs.min() + xs.max())
    cy = 0.5 * (ys.min() + ys.max())
    span = max(xs.max() - xs.min(), ys.max() - ys.min(), 1.0)
    far = 10.0 * span
    return np.array([
        [cx - far, cy - far],
        [cx + far, cy - far],
        [cx + far, cy + far],
        [cx - far, cy + far],
    ])


def voronoi_cell_polygons(points, width: float, height: float) -> List[Polygon]:
    """
    Compute the Voronoi cell of every point, clipped to the canvas.

    :param points: Sequence of points or (N, 2) array of coordinates.
    :param width: Canvas width; cells are clipped to [0, width].
    :type width: float
    :param height: Canvas height; cells are clipped to [0, height].
    :type height: float
    :return: One counter-clockwise vertex list per point (no repeated closing
             vertex). Empty list where a cell could not be computed, and for
             every repeat of an earlier point's coordinates.
    :rtype: List[Polygon]
    """
    coords = as_coordinates(points)
    n = len(coords)
    if n == 0:
        return []

    # Repeated coordinates: the first occurrence owns the cell
    _, first = np.unique(coords, axis=0, return_index=True)
    owners = np.sort(first)
    site_of = {int(i): k for k, i in enumerate(owners)}

    sites = np.vstack([coords[owners], _sentinel_sites(coords, width, height)])
    try:
        vor = Voronoi(sites)
    except QhullError as exc:
        logger.warning("Voronoi construction failed", points=n, reason=str(exc).splitlines()[0])
        return [[] for _ in range(n)]

    bounds = box(0.0, 0.0, width, height)
    claimed = set()
    cells: List[Polygon] = []
    for i in range(n):
        if i not in site_of:
            cells.append([])
            continue

        # Qhull may still merge near-coincident sites into one region
        region_index = int(vor.point_region[site_of[i]])
        region = vor.regions[region_index] if region_index >= 0 else []
        if len(region) < 3 or -1 in region or region_index in claimed:
            cells.append([])
            continue
        claimed.add(region_index)

        # Voronoi regions are convex; the hull orders their vertices
        cell = MultiPoint(vor.vertices[region]).convex_hull.intersection(bounds)
        if cell.is_empty or cell.geom_type != "Polygon":
            cells.append([])
            continue

        ring = orient(cell, sign=1.0).exterior.coords
        cells.append(polygon_without_duplicate([(float(x), float(y)) for x, y in ring]))

    return cells


def locate_cell(cells: Sequence[Sequence[Tuple[float, float]]], x: float, y: float) -> int:
    """
    Find the first cell polygon containing a location.

    :param cells: Cell polygons, as returned by :func:`voronoi_cell_polygons`.
    :type cells: Sequence[Sequence[Tuple[float, float]]]
    :param x: X coordinate.
    :type x: float
    :param y: Y coordinate.
    :type y: float
    :return: Cell index, or -1 if no cell contains the location.
    :rtype: int
    """
    for index, polygon in enumerate(cells):
        if is_point_in_polygon(x, y, polygon):
            return index
    return -1


def compute_voronoi_bruteforce(points, width: float, height: float) -> List[List[Tuple[int, int]]]:
    """
    Discrete Voronoi diagram by nearest-seed search over every pixel.

    Each integer pixel ``(x, y)`` with ``0 <= x < width`` and
    ``0 <= y < height`` goes to the seed with the smallest squared distance;
    on ties the lower seed index wins.

    :param points: Sequence of points or (N, 2) array of seed coordinates.
    :param width: Canvas width in pixels.
    :type width: float
    :param height: Canvas height in pixels.
    :type height: float
    :return: Pixel groups, one per seed, in row-major order.
    :rtype: List[List[Tuple[int, int]]]
    """
    coords = as_coordinates(points)
    n = len(coords)
    if n == 0:
        return []

    xs = np.arange(width)
    ys = np.arange(height)
    labels = np.empty((len(ys), len(xs)), dtype=np.int64)

    dx2 = (xs[:, None] - coords[None, :, 0]) ** 2
    for row, y in enumerate(ys):
        d2 = dx2 + (y - coords[None, :, 1]) ** 2
        labels[row] = np.argmin(d2, axis=1)

    cells = []
    for i in range(n):
        rows, cols = np.nonzero(labels == i)
        cells.append([(int(xs[c]), int(ys[r])) for r, c in zip(rows, cols)])
    return cells
