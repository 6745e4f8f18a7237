from __future__ import annotations
from typing import Optional, TYPE_CHECKING

from .geom import distance, distance_sq

if TYPE_CHECKING:
    from .face import HullFace
    from .vertex import Vertex


class HalfEdge:
    """
    Орієнтоване ребро грані (проти годинникової стрілки, якщо дивитися ззовні).
    vertex — голова ребра, хвіст — голова prev.
    opposite — ребро сусідньої грані з тими самими кінцями у зворотному напрямку.
    """
    __slots__ = ("vertex", "face", "next", "prev", "opposite")

    def __init__(self, vertex: Optional[Vertex] = None, face: Optional[HullFace] = None):
        self.vertex = vertex
        self.face = face
        self.next: Optional[HalfEdge] = None
        self.prev: Optional[HalfEdge] = None
        self.opposite: Optional[HalfEdge] = None

    def head(self) -> Vertex:
        return self.vertex

    def tail(self) -> Optional[Vertex]:
        return self.prev.vertex if self.prev is not None else None

    def opposite_face(self) -> Optional[HullFace]:
        return self.opposite.face if self.opposite is not None else None

    def set_opposite(self, edge: HalfEdge) -> None:
        # лише в обидва боки: усі перевірки покладаються на симетрію
        self.opposite = edge
        edge.opposite = self

    def length(self) -> float:
        tail = self.tail()
        if tail is None:
            return -1.0
        return distance(self.vertex.pnt, tail.pnt)

    def length_squared(self) -> float:
        tail = self.tail()
        if tail is None:
            return -1.0
        return distance_sq(self.vertex.pnt, tail.pnt)

    def vertex_string(self) -> str:
        tail = self.tail()
        if tail is not None:
            return f"{tail.index}-{self.vertex.index}"
        return f"?-{self.vertex.index}"

    def __repr__(self) -> str:
        return f"HalfEdge({self.vertex_string()})"
