# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Proximity Structures Package

Computes, from a finite set of 2-D points, the structures used to explore
proximity relationships: Voronoi cells, alpha shapes and alpha complexes,
the nearest-neighbor crust, the Gabriel graph, the relative neighborhood
graph and the Euclidean minimum spanning tree.

Modules:
--------
- geometry: Numeric primitives, Delaunay half-edge adapter, Voronoi cells, alpha shapes
- graphs: Nearest-neighbor, Gabriel and RNG filters, minimum spanning tree
- derived: Mode-driven computation of all derived structures
- points: Initial point layout and editable point set
- config: Constants and environment settings
- utils: Logging setup and helpers

Example Usage:
--------------
    import proximity_structures as ps

    points = ps.PointSet.initial(960, 600)
    alpha = ps.geometry.slider_to_radius(0.25)
    result = points.compute(alpha, ps.GraphMode.ALPHA_COMPLEX)

    # Or directly on coordinates
    result = ps.compute_derived_structures([(10, 10), (50, 20), (30, 60)],
                                           100, 100, 0.0, 'mst')
"""

__version__ = '0.1.0'
__author__ = 'Proximity Structures Team'

import logging

from . import config
from . import geometry
from . import graphs
from . import utils

from .model import (
    Point,
    Edge,
    Triangle,
    AlphaData,
    DerivedStructures,
    GraphMode
)
from .derived import compute_derived_structures
from .points import PointSet, create_initial_points, INITIAL_SEEDS
from .utils.helpers import configure_logging

# Logging is left to the host application; see configure_logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'config',
    'geometry',
    'graphs',
    'utils',
    'Point',
    'Edge',
    'Triangle',
    'AlphaData',
    'DerivedStructures',
    'GraphMode',
    'compute_derived_structures',
    'PointSet',
    'create_initial_points',
    'INITIAL_SEEDS',
    'configure_logging',
]
