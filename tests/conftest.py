import matplotlib
matplotlib.use('Agg')

import numpy as np
import pytest

from mst import Point, Vector3D, generate_points


def make_points(coords, colors=None):
    colors = colors or [0xFFFFFF] * len(coords)
    return [Point(i, Vector3D(*xyz), c) for i, (xyz, c) in enumerate(zip(coords, colors))]


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def line_points():
    return make_points([(0, 0, 0), (1, 0, 0), (2, 0, 0), (10, 0, 0)],
                       [0xFF0000, 0x00FF00, 0x0000FF, 0x000000])


@pytest.fixture
def cloud(rng):
    return generate_points(40, 80.0, rng)
