from __future__ import annotations
from typing import Iterator, Optional, TYPE_CHECKING

from .geom import Pt

if TYPE_CHECKING:
    from .face import HullFace


class Vertex:
    """
    Вхідна точка в ролі вершини оболонки.
    index: спершу позиція у вхідному масиві, після побудови — індекс серед вершин оболонки.
    prev/next: ланки у VertexList (claimed / unclaimed).
    face: грань, у чиєму outside set зараз лежить вершина (не володіє нею).
    """
    __slots__ = ("pnt", "index", "prev", "next", "face")

    def __init__(self, pnt: Pt, index: int):
        self.pnt = pnt
        self.index = index
        self.prev: Optional[Vertex] = None
        self.next: Optional[Vertex] = None
        self.face: Optional[HullFace] = None

    def __repr__(self) -> str:
        return f"Vertex({self.index}, {self.pnt.x}, {self.pnt.y}, {self.pnt.z})"


class VertexList:
    """
    Двозв'язний список вершин. Усі операції O(1), крім add_all (йде до кінця ланцюжка).
    Outside set кожної грані — суцільний відрізок цього списку.
    """

    def __init__(self):
        self.head: Optional[Vertex] = None
        self.tail: Optional[Vertex] = None

    def clear(self) -> None:
        self.head = self.tail = None

    def add(self, vtx: Vertex) -> None:
        if self.head is None:
            self.head = vtx
        else:
            self.tail.next = vtx
        vtx.prev = self.tail
        vtx.next = None
        self.tail = vtx

    def add_all(self, vtx: Vertex) -> None:
        """Дописати в кінець готовий ланцюжок, що починається з vtx."""
        if self.head is None:
            self.head = vtx
        else:
            self.tail.next = vtx
        vtx.prev = self.tail
        while vtx.next is not None:
            vtx = vtx.next
        self.tail = vtx

    def delete(self, vtx: Vertex) -> None:
        if vtx.prev is None:
            self.head = vtx.next
        else:
            vtx.prev.next = vtx.next
        if vtx.next is None:
            self.tail = vtx.prev
        else:
            vtx.next.prev = vtx.prev

    def delete_range(self, vtx1: Vertex, vtx2: Vertex) -> None:
        """Вирізати відрізок vtx1..vtx2 (включно). Внутрішні ланки відрізка не чіпаємо."""
        if vtx1.prev is None:
            self.head = vtx2.next
        else:
            vtx1.prev.next = vtx2.next
        if vtx2.next is None:
            self.tail = vtx1.prev
        else:
            vtx2.next.prev = vtx1.prev

    def insert_before(self, vtx: Vertex, nxt: Vertex) -> None:
        vtx.prev = nxt.prev
        if nxt.prev is None:
            self.head = vtx
        else:
            nxt.prev.next = vtx
        vtx.next = nxt
        nxt.prev = vtx

    def first(self) -> Optional[Vertex]:
        return self.head

    def is_empty(self) -> bool:
        return self.head is None

    def __iter__(self) -> Iterator[Vertex]:
        # наступника беремо до yield: споживач може перев'язати поточну вершину
        vtx = self.head
        while vtx is not None:
            nxt = vtx.next
            yield vtx
            vtx = nxt
