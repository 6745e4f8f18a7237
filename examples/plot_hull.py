# examples/plot_hull.py
from __future__ import annotations

import random

import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from quickhull3d.hull import QuickHull3D


def random_ball_points(n: int, seed: int = 1):
    """n випадкових точок у кулі радіуса 1 (rejection sampling)."""
    rnd = random.Random(seed)
    pts = []
    while len(pts) < n:
        x, y, z = (rnd.uniform(-1.0, 1.0) for _ in range(3))
        if x*x + y*y + z*z <= 1.0:
            pts.append((x, y, z))
    return pts


def plot_hull(points, hull: QuickHull3D) -> None:
    fig = plt.figure()
    ax = fig.add_subplot(projection="3d")

    verts = hull.vertices()
    polys = [[(verts[i].x, verts[i].y, verts[i].z) for i in face] for face in hull.faces()]
    ax.add_collection3d(Poly3DCollection(polys, alpha=0.3, edgecolor="k", linewidths=0.5))

    xs, ys, zs = zip(*points)
    ax.scatter(xs, ys, zs, s=4)

    # однакові масштаби
    max_range = max(max(xs) - min(xs), max(ys) - min(ys), max(zs) - min(zs)) or 1.0
    mx = 0.5 * (min(xs) + max(xs))
    my = 0.5 * (min(ys) + max(ys))
    mz = 0.5 * (min(zs) + max(zs))
    ax.set_xlim(mx - max_range / 2, mx + max_range / 2)
    ax.set_ylim(my - max_range / 2, my + max_range / 2)
    ax.set_zlim(mz - max_range / 2, mz + max_range / 2)

    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    ax.set_title(f"Convex hull: {hull.num_vertices} vertices, {hull.num_faces} faces")
    plt.show()


if __name__ == "__main__":
    pts = random_ball_points(200)
    hull = QuickHull3D(pts)
    plot_hull(pts, hull)
