# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Tests for the initial layout and the editable point set."""

import numpy as np
import pytest

from proximity_structures.config import INITIAL_POINT_MARGIN
from proximity_structures.model import GraphMode, Point
from proximity_structures.points import INITIAL_SEEDS, PointSet, create_initial_points


def test_initial_points_have_sequential_ids():
    points = create_initial_points(960, 600)
    assert len(points) == len(INITIAL_SEEDS) == 10
    assert [p.id for p in points] == list(range(10))


def test_initial_points_respect_margin():
    for width, height in [(960, 600), (320, 320), (2000, 400)]:
        for p in create_initial_points(width, height):
            assert INITIAL_POINT_MARGIN <= p.x <= width - INITIAL_POINT_MARGIN
            assert INITIAL_POINT_MARGIN <= p.y <= height - INITIAL_POINT_MARGIN


def test_initial_points_are_reproducible():
    assert create_initial_points(960, 600) == create_initial_points(960, 600)


def test_initial_jitter_of_first_point():
    # pseudo_random(0) == 0, so the first point shifts left by 6% of the width
    first = create_initial_points(1000, 1000)[0]
    assert first.x == pytest.approx((0.18 - 0.06) * 1000)


def test_point_id_is_read_only():
    p = Point(3, 1.0, 2.0)
    with pytest.raises(AttributeError):
        p.id = 4


def test_point_set_ids_are_never_reused():
    ps = PointSet.initial(960, 600)
    assert ps.next_id == 10

    added = ps.add(100.0, 100.0)
    assert added.id == 10
    ps.remove(len(ps) - 1)
    assert ps.add(120.0, 120.0).id == 11
    assert len(ps) == 11


def test_point_set_from_custom_points_continues_after_largest_id():
    ps = PointSet(100, 100, [Point(7, 1.0, 1.0), Point(2, 5.0, 5.0)])
    assert ps.next_id == 8


def test_move_is_clamped_to_canvas():
    ps = PointSet(100, 50, [Point(0, 10.0, 10.0)])
    moved = ps.move(0, 150.0, -20.0)
    assert (moved.x, moved.y) == (100.0, 0.0)
    assert (ps[0].x, ps[0].y) == (100.0, 0.0)


def test_move_and_remove_reject_bad_index():
    ps = PointSet(100, 100)
    with pytest.raises(IndexError):
        ps.move(0, 1.0, 1.0)
    with pytest.raises(IndexError):
        ps.remove(0)


def test_rescale_scales_points_proportionally():
    ps = PointSet(100, 50, [Point(0, 10.0, 20.0), Point(1, 100.0, 50.0)])
    ps.rescale(200, 100)
    assert (ps.width, ps.height) == (200.0, 100.0)
    assert (ps[0].x, ps[0].y) == (20.0, 40.0)
    assert (ps[1].x, ps[1].y) == (200.0, 100.0)


def test_rescale_from_zero_size_keeps_points():
    ps = PointSet(0, 0, [Point(0, 0.0, 0.0), Point(1, 3.0, 4.0)])
    ps.rescale(100, 100)
    assert (ps.width, ps.height) == (100.0, 100.0)
    assert (ps[1].x, ps[1].y) == (3.0, 4.0)


def test_find_at_prefers_topmost_point():
    ps = PointSet(100, 100, [Point(0, 50.0, 50.0), Point(1, 55.0, 50.0), Point(2, 90.0, 90.0)])
    assert ps.find_at(52.0, 50.0) == 1
    assert ps.find_at(90.0, 100.0) == 2
    assert ps.find_at(10.0, 10.0) == -1
    assert ps.find_at(52.0, 50.0, hit_distance=1.0) == -1


def test_items_and_snapshots_are_copies():
    ps = PointSet(100, 100, [Point(0, 10.0, 10.0)])
    item = ps[0]
    item.x = 99.0
    snap = ps.snapshot()
    snap[0].y = 99.0
    assert (ps[0].x, ps[0].y) == (10.0, 10.0)
    assert isinstance(snap, tuple)


def test_compute_runs_on_current_points():
    ps = PointSet(100, 100, [Point(0, 0.0, 0.0), Point(1, 1.0, 0.0),
                             Point(2, 1.0, 1.0), Point(3, 0.0, 1.0), Point(4, 0.5, 0.5)])
    result = ps.compute(0.0, GraphMode.MST)
    assert result.graph_edges == [(0, 4), (1, 4), (2, 4), (3, 4)]

    ps.remove(4)
    assert len(ps.compute(0.0, "mst").graph_edges) == 3


def test_initial_point_set_uses_settings_defaults():
    ps = PointSet.initial()
    assert (ps.width, ps.height) == (960.0, 600.0)
    assert len(ps) == 10


def test_resize_adds_random_points_inside_canvas():
    ps = PointSet(100, 50, [Point(0, 1.0, 1.0)])
    ps.resize(6, rng=np.random.default_rng(0))
    assert len(ps) == 6
    assert [p.id for p in ps.snapshot()] == list(range(6))
    for p in ps.snapshot():
        assert 0.0 <= p.x <= 100.0
        assert 0.0 <= p.y <= 50.0


def test_resize_truncates_from_the_end_without_reusing_ids():
    ps = PointSet.initial(960, 600)
    ps.resize(3)
    assert [p.id for p in ps.snapshot()] == [0, 1, 2]

    ps.resize(4, rng=np.random.default_rng(1))
    assert ps[3].id == 10

    before = ps.snapshot()
    ps.resize(4)
    assert ps.snapshot() == before


def test_resize_is_reproducible_with_a_seeded_generator():
    a = PointSet(200, 200)
    b = PointSet(200, 200)
    a.resize(5, rng=np.random.default_rng(42))
    b.resize(5, rng=np.random.default_rng(42))
    assert a.snapshot() == b.snapshot()


def test_resize_rejects_negative_count():
    with pytest.raises(ValueError):
        PointSet(100, 100).resize(-1)
