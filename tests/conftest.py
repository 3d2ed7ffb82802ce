# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Shared fixtures."""

import numpy as np
import pytest

from proximity_structures.model import Point


@pytest.fixture
def random_points():
    # Generic position: no ties, no cocircular quadruples
    rng = np.random.default_rng(7)
    return rng.uniform(0.0, 100.0, size=(40, 2))


@pytest.fixture
def unit_square_with_center():
    return [
        Point(0, 0.0, 0.0),
        Point(1, 1.0, 0.0),
        Point(2, 1.0, 1.0),
        Point(3, 0.0, 1.0),
        Point(4, 0.5, 0.5),
    ]
