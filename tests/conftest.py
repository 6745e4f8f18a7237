import random

import pytest

from quickhull3d.geom import Pt

CUBE = [
    (0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0), (1.0, 0.0, 1.0), (1.0, 1.0, 1.0), (0.0, 1.0, 1.0),
]

AXIS_EXTREMA = [
    (1.0, 0.0, 0.0), (-1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0), (0.0, -1.0, 0.0),
    (0.0, 0.0, 1.0), (0.0, 0.0, -1.0),
]


def random_ball(n: int, seed: int, radius: float = 0.95):
    rnd = random.Random(seed)
    pts = []
    while len(pts) < n:
        x, y, z = (rnd.uniform(-radius, radius) for _ in range(3))
        if x*x + y*y + z*z < radius*radius:
            pts.append((x, y, z))
    return pts


@pytest.fixture
def cube_points():
    return [Pt(*p) for p in CUBE]


@pytest.fixture
def tetra_points():
    return [Pt(0.0, 0.0, 0.0), Pt(1.0, 0.0, 0.0), Pt(0.0, 1.0, 0.0), Pt(0.0, 0.0, 1.0)]


@pytest.fixture
def pyramid_points():
    return [
        Pt(0.0, 0.0, 0.0), Pt(0.0, 0.0, 1.0), Pt(1.0, 0.0, 1.0),
        Pt(1.0, 0.0, 0.0), Pt(1.0, 1.0, 1.0),
    ]


@pytest.fixture
def ball_with_extrema():
    """100 точок усередині кулі + 6 точок на сфері по осях (індекси 100..105)."""
    return random_ball(100, seed=42) + AXIS_EXTREMA


@pytest.fixture
def gaussian_cloud():
    rnd = random.Random(7)
    return [(rnd.gauss(0, 1), rnd.gauss(0, 1), rnd.gauss(0, 1)) for _ in range(400)]
