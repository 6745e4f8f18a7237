from __future__ import annotations
from typing import List, Optional, Set, Tuple

import numpy as np

from .geom import unique_points
from .hull import QuickHull3D


def convex_hull(
    points,
    triangulate: bool = False,
    tolerance: Optional[float] = None,
    dedupe: bool = False,
) -> Tuple[np.ndarray, List[List[int]]]:
    """
    Повний пайплайн для масиву (n, 3):
      - за бажанням прибирає дублікати точок;
      - будує опуклу оболонку (QuickHull3D);
      - за бажанням тріангулює грані.

    Повертає:
      vertices — масив (m, 3) вершин оболонки;
      faces    — списки індексів у vertices (проти годинникової стрілки ззовні).
    """
    arr = np.asarray(points, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"expected an (n, 3) array of points, got shape {arr.shape}")

    if dedupe:
        arr = np.array([tuple(p) for p in unique_points(arr.tolist())], dtype=float).reshape(-1, 3)

    hull = QuickHull3D(tolerance=tolerance)
    hull.build_from_coords(arr)
    if triangulate:
        hull.triangulate()

    vertices = np.array([tuple(p) for p in hull.vertices()], dtype=float).reshape(-1, 3)
    return vertices, hull.faces()


def _fan_triangles(vertices: np.ndarray, faces: List[List[int]]):
    for idxs in faces:
        p0 = vertices[idxs[0]]
        for a, b in zip(idxs[1:-1], idxs[2:]):
            yield p0, vertices[a], vertices[b]


def hull_area(vertices: np.ndarray, faces: List[List[int]]) -> float:
    """Площа поверхні (грані — опуклі многокутники)."""
    v = np.asarray(vertices, dtype=float)
    total = 0.0
    for p0, p1, p2 in _fan_triangles(v, faces):
        total += 0.5 * float(np.linalg.norm(np.cross(p1 - p0, p2 - p0)))
    return total


def hull_volume(vertices: np.ndarray, faces: List[List[int]]) -> float:
    """Об'єм через суму знакових тетраедрів (0, p0, p1, p2); грані орієнтовані назовні."""
    v = np.asarray(vertices, dtype=float)
    total = 0.0
    for p0, p1, p2 in _fan_triangles(v, faces):
        total += float(np.dot(p0, np.cross(p1, p2)))
    return total / 6.0


def reference_hull(points, backend: str = "scipy") -> Set[int]:
    """
    Індекси вершин оболонки, пораховані сторонньою реалізацією — для звірки.
    """
    if backend.lower() == "scipy":
        try:
            from scipy.spatial import ConvexHull
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy', але SciPy не встановлено. "
                "Встанови scipy або extra 'quickhull3d[scipy]'."
            ) from e

        arr = np.asarray(points, dtype=float)
        return {int(i) for i in ConvexHull(arr).vertices}

    raise ValueError(f"Невідомий backend: {backend}")
