# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Geometry module for primitives, tessellation, Voronoi cells and alpha shapes."""

from .primitives import (
    clamp,
    pseudo_random,
    distance,
    distance_squared,
    triangle_area,
    circumradius,
    is_point_in_polygon,
    approx_equal,
    approx_zero,
    slider_to_radius,
    radius_to_slider
)

from .tessellation import (
    Triangulation,
    next_halfedge,
    compute_delaunay,
    collect_delaunay_edges,
    delaunay_adjacency
)

from .voronoi import (
    voronoi_cell_polygons,
    polygon_without_duplicate,
    shrink_polygon,
    locate_cell,
    compute_voronoi_bruteforce
)

from .boundaries import (
    compute_alpha_data
)

__all__ = [
    # Primitives
    'clamp',
    'pseudo_random',
    'distance',
    'distance_squared',
    'triangle_area',
    'circumradius',
    'is_point_in_polygon',
    'approx_equal',
    'approx_zero',
    'slider_to_radius',
    'radius_to_slider',
    # Tessellation
    'Triangulation',
    'next_halfedge',
    'compute_delaunay',
    'collect_delaunay_edges',
    'delaunay_adjacency',
    # Voronoi
    'voronoi_cell_polygons',
    'polygon_without_duplicate',
    'shrink_polygon',
    'locate_cell',
    'compute_voronoi_bruteforce',
    # Boundaries
    'compute_alpha_data',
]
