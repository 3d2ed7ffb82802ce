# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Tests for alpha-shape / alpha-complex construction."""

import numpy as np
import pytest

from proximity_structures.geometry.boundaries import compute_alpha_data
from proximity_structures.geometry.tessellation import Triangulation, compute_delaunay

UNIT_SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
SPLIT_SQUARE = Triangulation.from_arrays([0, 1, 2, 0, 2, 3], [-1, -1, 3, 2, -1, -1])


def test_right_triangle_qualifies_at_exactly_its_circumradius():
    points = [(0.0, 0.0), (4.0, 0.0), (0.0, 3.0)]
    tri = compute_delaunay(points)

    data = compute_alpha_data(points, tri, 2.5)
    assert len(data.triangles) == 1
    assert sorted(data.triangles[0]) == [0, 1, 2]
    assert sorted(data.all_edges) == [(0, 1), (0, 2), (1, 2)]
    assert sorted(data.boundary_edges) == [(0, 1), (0, 2), (1, 2)]

    below = compute_alpha_data(points, tri, 2.49)
    assert below.triangles == []
    assert below.all_edges == []
    assert below.boundary_edges == []


def test_shared_edge_is_interior():
    data = compute_alpha_data(UNIT_SQUARE, SPLIT_SQUARE, 1.0)
    assert data.triangles == [(0, 1, 2), (0, 2, 3)]
    assert data.all_edges == [(0, 1), (1, 2), (0, 2), (2, 3), (0, 3)]
    assert data.boundary_edges == [(0, 1), (1, 2), (2, 3), (0, 3)]


def test_malformed_records_are_skipped():
    tri = Triangulation.from_arrays([0, 1, 2, 0, 0, 1, 0, 1, 9, -1, 1, 2, 0, 1], [])
    data = compute_alpha_data(UNIT_SQUARE, tri, 10.0)
    assert data.triangles == [(0, 1, 2)]


def test_collinear_points_never_qualify():
    points = [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (3.0, 0.0)]
    tri = Triangulation.from_arrays([0, 1, 2, 1, 2, 3, 0, 1, 3], [])
    data = compute_alpha_data(points, tri, 1e12)
    assert data.triangles == []
    assert data.all_edges == []


def test_empty_and_zero_alpha_give_empty_structures(random_points):
    empty = compute_alpha_data([], Triangulation.empty(), 10.0)
    assert (empty.triangles, empty.all_edges, empty.boundary_edges) == ([], [], [])

    zero = compute_alpha_data(random_points, compute_delaunay(random_points), 0.0)
    assert (zero.triangles, zero.all_edges, zero.boundary_edges) == ([], [], [])


def test_negative_alpha_is_rejected():
    with pytest.raises(ValueError):
        compute_alpha_data(UNIT_SQUARE, SPLIT_SQUARE, -1.0)


def test_alpha_complex_grows_monotonically(random_points):
    tri = compute_delaunay(random_points)
    previous = set()
    for alpha in [0.5, 2.0, 5.0, 10.0, 20.0, 50.0, 1e6]:
        current = set(compute_alpha_data(random_points, tri, alpha).triangles)
        assert previous <= current
        previous = current
    # a huge radius keeps every Delaunay triangle
    assert len(previous) == tri.triangle_count


def test_boundary_edges_are_subset_of_all_edges(random_points):
    tri = compute_delaunay(random_points)
    for alpha in [3.0, 8.0, 15.0, 1e6]:
        data = compute_alpha_data(random_points, tri, alpha)
        assert set(data.boundary_edges) <= set(data.all_edges)
        assert len(set(data.all_edges)) == len(data.all_edges)


def test_triangles_keep_source_order(random_points):
    tri = compute_delaunay(random_points)
    source = [tuple(int(v) for v in t) for t in np.asarray(tri.triangles).reshape(-1, 3)]
    data = compute_alpha_data(random_points, tri, 12.0)
    positions = [source.index(t) for t in data.triangles]
    assert positions == sorted(positions)


def test_full_complex_boundary_is_convex_hull(random_points):
    from scipy.spatial import ConvexHull

    tri = compute_delaunay(random_points)
    data = compute_alpha_data(random_points, tri, 1e9)
    hull_size = len(ConvexHull(random_points).vertices)
    assert len(data.boundary_edges) == hull_size
