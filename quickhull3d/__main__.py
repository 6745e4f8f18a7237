"""Command-line interface: python -m quickhull3d points.xyz -o hull.off"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from quickhull3d.errors import HullError
from quickhull3d.hull import QuickHull3D
from quickhull3d.logging_config import setup_logging
from quickhull3d.pipeline import hull_area, hull_volume

logger = logging.getLogger("quickhull3d.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="quickhull3d", description="3D convex hull of an x y z point file")
    parser.add_argument("input", help="text file with one 'x y z' row per point")
    parser.add_argument("-o", "--output", help="write the hull as OFF to this path")
    parser.add_argument("--triangulate", action="store_true", help="split merged faces into triangles")
    parser.add_argument("--tolerance", type=float, default=None, help="explicit distance tolerance")
    parser.add_argument("--check", action="store_true", help="run the hull self check")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    points = np.loadtxt(args.input, dtype=float, ndmin=2)
    if points.shape[1] != 3:
        logger.error("Expected 3 columns (x y z) in %s, got %d", args.input, points.shape[1])
        return 1
    logger.info("Read %d points from %s", len(points), args.input)

    hull = QuickHull3D(tolerance=args.tolerance)
    try:
        hull.build_from_coords(points)
    except HullError as exc:
        logger.error("Cannot build hull: %s", exc)
        return 1

    if args.triangulate:
        hull.triangulate()

    vertices = np.array([tuple(p) for p in hull.vertices()], dtype=float)
    faces = hull.faces()
    logger.info(
        "Hull: %d vertices, %d faces, %d edges, area %.6g, volume %.6g",
        hull.num_vertices, hull.num_faces, hull.num_edges,
        hull_area(vertices, faces), hull_volume(vertices, faces),
    )

    if args.check and not hull.check():
        logger.error("Hull self check failed")
        return 1

    if args.output:
        hull.write_off(args.output)
        logger.info("Wrote %s", args.output)
    else:
        print(hull.to_off())
    return 0


if __name__ == "__main__":
    sys.exit(main())
