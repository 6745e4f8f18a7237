"""
quickhull3d — опукла оболонка 3D точок (Quickhull над half-edge сіткою, Py 3.10+).
Злиття майже копланарних граней, автоматичний допуск, OFF-експорт.
"""

__version__ = "0.2.0"

from quickhull3d.geom import Pt, MACHINE_EPS, centroid, unique_points
from quickhull3d.errors import (
    HullError, InsufficientInputError, DegenerateInputError, InternalInconsistencyError,
)
from quickhull3d.face import FaceStatus, HullFace, HullFaceList
from quickhull3d.halfedge import HalfEdge
from quickhull3d.vertex import Vertex, VertexList
from quickhull3d.hull import QuickHull3D, FaceIndexFlags
from quickhull3d.pipeline import convex_hull

__all__ = [
    "Pt", "MACHINE_EPS", "centroid", "unique_points",
    "HullError", "InsufficientInputError", "DegenerateInputError", "InternalInconsistencyError",
    "FaceStatus", "HullFace", "HullFaceList", "HalfEdge", "Vertex", "VertexList",
    "QuickHull3D", "FaceIndexFlags", "convex_hull", "__version__",
]
