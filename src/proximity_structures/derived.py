# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Derived-structure computation.

``compute_derived_structures`` is the entry point: given a point set, the
canvas bounds, an alpha radius and a mode, it runs the builders the mode
needs and returns cells, edges and triangles. It is pure and keeps no state
between calls; callers that want caching key it on all five arguments.
"""

from typing import Union

from .geometry import (
    collect_delaunay_edges,
    compute_alpha_data,
    compute_delaunay,
    compute_voronoi_bruteforce,
    voronoi_cell_polygons,
)
from .graphs import (
    compute_gabriel_edges,
    compute_minimum_spanning_tree_edges,
    compute_nearest_neighbor_edges,
    compute_relative_neighborhood_edges,
)
from .model import DerivedStructures, GraphMode
from .utils.helpers import as_coordinates, get_logger

logger = get_logger(__name__)


def compute_derived_structures(points,
                               width: float,
                               height: float,
                               alpha: float,
                               mode: Union[GraphMode, str]) -> DerivedStructures:
    """
    Compute every structure needed to display one mode.

    Voronoi cells are computed for all modes (other modes show them in the
    background); ``voronoi-bruteforce`` replaces them with pixel groups.

    :param points: Sequence of points or (N, 2) array of coordinates. Not
                   modified.
    :param width: Canvas width used to clip cells.
    :type width: float
    :param height: Canvas height used to clip cells.
    :type height: float
    :param alpha: Circumradius threshold, used by the alpha modes only.
    :type alpha: float
    :param mode: Graph mode, as a member or its string value.
    :type mode: Union[GraphMode, str]
    :return: Cells, graph edges and alpha triangles for the mode.
    :rtype: DerivedStructures
    :raises ValueError: For an unknown mode, or a negative alpha in an alpha mode.
    """
    mode = GraphMode.parse(mode)
    coords = as_coordinates(points)

    if len(coords) == 0:
        return DerivedStructures.empty()

    if mode is GraphMode.VORONOI_BRUTEFORCE:
        result = DerivedStructures(voronoi_cells=compute_voronoi_bruteforce(coords, width, height))
        logger.debug("Derived structures computed", mode=mode.value, points=len(coords))
        return result

    cells = voronoi_cell_polygons(coords, width, height)

    if mode is GraphMode.VORONOI:
        result = DerivedStructures(voronoi_cells=cells)

    elif mode in (GraphMode.ALPHA_SHAPE, GraphMode.ALPHA_COMPLEX):
        alpha_data = compute_alpha_data(coords, compute_delaunay(coords), alpha)
        if mode is GraphMode.ALPHA_SHAPE:
            result = DerivedStructures(voronoi_cells=cells, graph_edges=alpha_data.boundary_edges)
        else:
            result = DerivedStructures(voronoi_cells=cells,
                                       graph_edges=alpha_data.all_edges,
                                       alpha_triangles=alpha_data.triangles)

    elif mode is GraphMode.NN_CRUST:
        result = DerivedStructures(voronoi_cells=cells,
                                   graph_edges=compute_nearest_neighbor_edges(coords))

    elif mode in (GraphMode.GABRIEL, GraphMode.RNG):
        candidates = collect_delaunay_edges(compute_delaunay(coords))
        if mode is GraphMode.GABRIEL:
            edges = compute_gabriel_edges(coords, candidates)
        else:
            edges = compute_relative_neighborhood_edges(coords, candidates)
        result = DerivedStructures(voronoi_cells=cells, graph_edges=edges)

    elif mode is GraphMode.MST:
        result = DerivedStructures(voronoi_cells=cells,
                                   graph_edges=compute_minimum_spanning_tree_edges(coords))

    else:
        raise ValueError(f"Unhandled graph mode: {mode.value}")

    logger.debug("Derived structures computed",
                 mode=mode.value,
                 points=len(coords),
                 edges=len(result.graph_edges),
                 triangles=len(result.alpha_triangles))
    return result
