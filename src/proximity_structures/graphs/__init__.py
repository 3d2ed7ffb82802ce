# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Graphs module for proximity graphs and spanning trees."""

from .proximity import (
    compute_nearest_neighbor_edges,
    compute_gabriel_edges,
    compute_relative_neighborhood_edges
)

from .spanning_tree import (
    compute_minimum_spanning_tree_edges,
    total_length
)

__all__ = [
    # Proximity
    'compute_nearest_neighbor_edges',
    'compute_gabriel_edges',
    'compute_relative_neighborhood_edges',
    # Spanning tree
    'compute_minimum_spanning_tree_edges',
    'total_length',
]
