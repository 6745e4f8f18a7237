import numpy as np
import pytest

from quickhull3d.pipeline import convex_hull, hull_area, hull_volume, reference_hull

from conftest import AXIS_EXTREMA, CUBE, random_ball


def test_convex_hull_cube():
    vertices, faces = convex_hull(np.array(CUBE))
    assert vertices.shape == (8, 3)
    assert len(faces) == 6
    assert hull_volume(vertices, faces) == pytest.approx(1.0)
    assert hull_area(vertices, faces) == pytest.approx(6.0)


def test_convex_hull_triangulated():
    vertices, faces = convex_hull(CUBE, triangulate=True)
    assert len(faces) == 12
    assert all(len(f) == 3 for f in faces)
    assert hull_volume(vertices, faces) == pytest.approx(1.0)
    assert hull_area(vertices, faces) == pytest.approx(6.0)


def test_convex_hull_dedupe():
    pts = np.array(CUBE + CUBE[:3] + [(0.5, 0.5, 0.5)])
    vertices, faces = convex_hull(pts, dedupe=True)
    assert vertices.shape == (8, 3)
    assert len(faces) == 6


def test_scaled_volume():
    pts = np.array(CUBE) * np.array([2.0, 3.0, 4.0]) + 10.0
    vertices, faces = convex_hull(pts)
    assert hull_volume(vertices, faces) == pytest.approx(24.0)
    assert hull_area(vertices, faces) == pytest.approx(2 * (6 + 8 + 12))


def test_bad_shape():
    with pytest.raises(ValueError, match="expected an"):
        convex_hull(np.zeros((5, 2)))


def test_reference_hull_matches():
    pytest.importorskip("scipy")
    pts = np.array(random_ball(200, seed=11) + AXIS_EXTREMA)
    vertices, _ = convex_hull(pts)
    ref = reference_hull(pts)
    assert len(ref) == len(vertices)
    assert {tuple(p) for p in pts[sorted(ref)]} == {tuple(v) for v in vertices}


def test_reference_hull_unknown_backend():
    with pytest.raises(ValueError):
        reference_hull(np.array(CUBE), backend="cgal")
