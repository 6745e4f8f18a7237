from __future__ import annotations
from enum import Enum
from math import sqrt
from typing import Iterator, List, Optional, Sequence

from .errors import InternalInconsistencyError
from .geom import Pt, add, cross, dot, normalize, norm, scale, sub
from .halfedge import HalfEdge
from .vertex import Vertex

_ZERO = Pt(0.0, 0.0, 0.0)


class FaceStatus(Enum):
    VISIBLE = 1
    NON_CONVEX = 2
    DELETED = 3


class HullFace:
    """
    Плоска опукла грань оболонки, обмежена кільцем half-edge (проти годинникової
    стрілки, якщо дивитися ззовні). Після злиття граней це вже не обов'язково
    трикутник.

    normal/plane_offset задають площину: normal·p == plane_offset.
    area — модуль суми векторних добутків (подвоєна площа).
    outside — перша вершина outside set у спільному списку claimed.
    next — ланка у HullFaceList.
    """

    def __init__(self):
        self.he0: Optional[HalfEdge] = None
        self.normal: Pt = _ZERO
        self.centroid: Pt = _ZERO
        self.area = 0.0
        self.plane_offset = 0.0
        self.num_verts = 0
        self.mark = FaceStatus.VISIBLE
        self.outside: Optional[Vertex] = None
        self.next: Optional[HullFace] = None

    # ---------------- Конструктори ----------------
    @classmethod
    def create(cls, vertices: Sequence[Vertex], indices: Sequence[int]) -> HullFace:
        """Грань із довільного опуклого многокутника vertices[indices[0]], ..."""
        face = cls()
        he_prev: Optional[HalfEdge] = None
        for idx in indices:
            he = HalfEdge(vertices[idx], face)
            if he_prev is not None:
                he.prev = he_prev
                he_prev.next = he
            else:
                face.he0 = he
            he_prev = he
        face.he0.prev = he_prev
        he_prev.next = face.he0

        face._compute_normal_and_centroid()
        return face

    @classmethod
    def create_triangle(cls, v0: Vertex, v1: Vertex, v2: Vertex, min_area: float = 0.0) -> HullFace:
        face = cls()
        he0 = HalfEdge(v0, face)
        he1 = HalfEdge(v1, face)
        he2 = HalfEdge(v2, face)

        he0.prev = he2
        he0.next = he1
        he1.prev = he0
        he1.next = he2
        he2.prev = he1
        he2.next = he0

        face.he0 = he0
        face._compute_normal_and_centroid(min_area)
        return face

    # ---------------- Площина ----------------
    def _compute_centroid(self) -> None:
        sx = sy = sz = 0.0
        he = self.he0
        while True:
            p = he.vertex.pnt
            sx += p.x; sy += p.y; sz += p.z
            he = he.next
            if he is self.he0:
                break
        inv = 1.0 / self.num_verts
        self.centroid = Pt(sx*inv, sy*inv, sz*inv)

    def _compute_normal(self) -> None:
        # метод Ньюела: віяло векторних добутків від голови he0
        he1 = self.he0.next
        he2 = he1.next

        p0 = self.he0.vertex.pnt
        d2 = sub(he1.vertex.pnt, p0)

        normal = _ZERO
        self.num_verts = 2
        while he2 is not self.he0:
            d1 = d2
            d2 = sub(he2.vertex.pnt, p0)
            normal = add(normal, cross(d1, d2))
            he2 = he2.next
            self.num_verts += 1

        self.area = norm(normal)
        self.normal = scale(normal, 1.0 / self.area) if self.area > 0.0 else normal

    def _compute_normal_robust(self, min_area: float) -> None:
        self._compute_normal()
        if self.area >= min_area:
            return

        # майже вироджена грань: прибираємо з нормалі складову вздовж
        # найдовшого ребра, воно визначене найнадійніше
        hedge_max: Optional[HalfEdge] = None
        len_sqr_max = 0.0
        hedge = self.he0
        while True:
            len_sqr = hedge.length_squared()
            if len_sqr > len_sqr_max:
                hedge_max = hedge
                len_sqr_max = len_sqr
            hedge = hedge.next
            if hedge is self.he0:
                break
        if hedge_max is None:
            return

        u = scale(sub(hedge_max.head().pnt, hedge_max.tail().pnt), 1.0 / sqrt(len_sqr_max))
        residual = sub(self.normal, scale(u, dot(self.normal, u)))
        if norm(residual) > 0.0:
            self.normal = normalize(residual)

    def _compute_normal_and_centroid(self, min_area: Optional[float] = None) -> None:
        if min_area is not None:
            self._compute_normal_robust(min_area)
            self._compute_centroid()
            self.plane_offset = dot(self.normal, self.centroid)
            return

        self._compute_normal()
        self._compute_centroid()
        self.plane_offset = dot(self.normal, self.centroid)

        numv = 0
        he = self.he0
        while True:
            numv += 1
            he = he.next
            if he is self.he0:
                break
        if numv != self.num_verts:
            raise InternalInconsistencyError(
                f"face {self.vertex_string()} numVerts={self.num_verts} should be {numv}")

    def distance_to_plane(self, p: Pt) -> float:
        n = self.normal
        return n.x*p.x + n.y*p.y + n.z*p.z - self.plane_offset

    # ---------------- Ребра ----------------
    def first_edge(self) -> HalfEdge:
        return self.he0

    def get_edge(self, idx: int) -> HalfEdge:
        """i-те ребро від he0; від'ємний індекс іде назад по кільцю."""
        he = self.he0
        while idx > 0:
            he = he.next
            idx -= 1
        while idx < 0:
            he = he.prev
            idx += 1
        return he

    def edges(self) -> Iterator[HalfEdge]:
        he = self.he0
        while True:
            yield he
            he = he.next
            if he is self.he0:
                break

    def find_edge(self, vt: Vertex, vh: Vertex) -> Optional[HalfEdge]:
        for he in self.edges():
            if he.head() is vh and he.tail() is vt:
                return he
        return None

    def num_vertices(self) -> int:
        return self.num_verts

    def vertex_indices(self) -> List[int]:
        return [he.vertex.index for he in self.edges()]

    def vertex_string(self) -> str:
        return " ".join(str(i) for i in self.vertex_indices())

    def __repr__(self) -> str:
        return f"HullFace({self.vertex_string()}, {self.mark.name})"

    # ---------------- Злиття ----------------
    def merge_adjacent_face(self, hedge_adj: HalfEdge, discarded: List[HullFace]) -> int:
        """
        Поглинути грань з іншого боку hedge_adj. Якщо грані мають кілька спільних
        ребер поспіль, прибираються всі. discarded заповнюється відкинутими гранями
        (1 або 2), повертається їх кількість.
        """
        discarded.clear()
        opp_face = hedge_adj.opposite_face()

        discarded.append(opp_face)
        opp_face.mark = FaceStatus.DELETED

        hedge_opp = hedge_adj.opposite

        hedge_adj_prev = hedge_adj.prev
        hedge_adj_next = hedge_adj.next
        hedge_opp_prev = hedge_opp.prev
        hedge_opp_next = hedge_opp.next

        while hedge_adj_prev.opposite_face() is opp_face:
            hedge_adj_prev = hedge_adj_prev.prev
            hedge_opp_next = hedge_opp_next.next

        while hedge_adj_next.opposite_face() is opp_face:
            hedge_opp_prev = hedge_opp_prev.prev
            hedge_adj_next = hedge_adj_next.next

        hedge = hedge_opp_next
        stop = hedge_opp_prev.next
        while hedge is not stop:
            hedge.face = self
            hedge = hedge.next

        if hedge_adj is self.he0:
            self.he0 = hedge_adj_next

        # голова
        discarded_face = self._connect_half_edges(hedge_opp_prev, hedge_adj_next)
        if discarded_face is not None:
            discarded.append(discarded_face)

        # хвіст
        discarded_face = self._connect_half_edges(hedge_adj_prev, hedge_opp_next)
        if discarded_face is not None:
            discarded.append(discarded_face)

        self._compute_normal_and_centroid()
        self.check_consistency()

        return len(discarded)

    def _connect_half_edges(self, hedge_prev: HalfEdge, hedge: HalfEdge) -> Optional[HullFace]:
        # порядок перевірок чутливий на межі допуску, не переставляти
        discarded_face: Optional[HullFace] = None

        if hedge_prev.opposite_face() is hedge.opposite_face():
            # зайве ребро: обидва ведуть в одну й ту саму сусідню грань
            opp_face = hedge.opposite_face()

            if hedge_prev is self.he0:
                self.he0 = hedge

            if opp_face.num_vertices() == 3:
                # сусідній трикутник вироджується, викидаємо його
                hedge_opp = hedge.opposite.prev.opposite
                opp_face.mark = FaceStatus.DELETED
                discarded_face = opp_face
            else:
                hedge_opp = hedge.opposite.next
                if opp_face.he0 is hedge_opp.prev:
                    opp_face.he0 = hedge_opp
                hedge_opp.prev = hedge_opp.prev.prev
                hedge_opp.prev.next = hedge_opp

            hedge.prev = hedge_prev.prev
            hedge.prev.next = hedge

            hedge.opposite = hedge_opp
            hedge_opp.opposite = hedge

            # opp_face змінилась, перерахувати площину
            opp_face._compute_normal_and_centroid()
        else:
            hedge_prev.next = hedge
            hedge.prev = hedge_prev

        return discarded_face

    # ---------------- Тріангуляція ----------------
    def triangulate(self, new_faces: HullFaceList, min_area: float) -> None:
        """
        Віялова тріангуляція від голови he0. Нові трикутники йдуть у new_faces,
        сама грань стає останнім трикутником віяла.
        """
        if self.num_vertices() < 4:
            return

        v0 = self.he0.head()

        hedge = self.he0.next
        opp_prev = hedge.opposite
        face0: Optional[HullFace] = None

        hedge = hedge.next
        while hedge is not self.he0.prev:
            face = HullFace.create_triangle(v0, hedge.prev.head(), hedge.head(), min_area)
            face.he0.next.set_opposite(opp_prev)
            face.he0.prev.set_opposite(hedge.opposite)
            opp_prev = face.he0

            new_faces.add(face)
            if face0 is None:
                face0 = face
            hedge = hedge.next

        hedge = HalfEdge(self.he0.prev.prev.head(), self)
        hedge.set_opposite(opp_prev)

        hedge.prev = self.he0
        hedge.prev.next = hedge

        hedge.next = self.he0.prev
        hedge.next.prev = hedge

        self._compute_normal_and_centroid(min_area)
        self.check_consistency()

        face = face0
        while face is not None:
            face.check_consistency()
            face = face.next

    # ---------------- Аудит ----------------
    def check_consistency(self, tolerance: Optional[float] = None) -> float:
        """
        Перевірити інваріанти кільця. Повертає максимальне відхилення вершин від
        площини; якщо задано tolerance, перевищення теж вважається помилкою.
        """
        if self.num_verts < 3:
            raise InternalInconsistencyError(f"degenerate face: {self.vertex_string()}")

        maxd = 0.0
        numv = 0
        for hedge in self.edges():
            hedge_opp = hedge.opposite
            if hedge_opp is None:
                raise InternalInconsistencyError(
                    f"face {self.vertex_string()}: unreflected half edge {hedge.vertex_string()}")
            if hedge_opp.opposite is not hedge:
                other = hedge_opp.opposite.vertex_string() if hedge_opp.opposite is not None else "None"
                raise InternalInconsistencyError(
                    f"face {self.vertex_string()}: opposite half edge {hedge_opp.vertex_string()} "
                    f"has opposite {other}")
            if hedge_opp.head() is not hedge.tail() or hedge.head() is not hedge_opp.tail():
                raise InternalInconsistencyError(
                    f"face {self.vertex_string()}: half edge {hedge.vertex_string()} "
                    f"reflected by {hedge_opp.vertex_string()}")

            opp_face = hedge_opp.face
            if opp_face is None:
                raise InternalInconsistencyError(
                    f"face {self.vertex_string()}: no face on half edge {hedge_opp.vertex_string()}")
            if opp_face.mark is FaceStatus.DELETED:
                raise InternalInconsistencyError(
                    f"face {self.vertex_string()}: opposite face {opp_face.vertex_string()} not on hull")

            d = abs(self.distance_to_plane(hedge.head().pnt))
            if d > maxd:
                maxd = d
            numv += 1

        if numv != self.num_verts:
            raise InternalInconsistencyError(
                f"face {self.vertex_string()} numVerts={self.num_verts} should be {numv}")
        if tolerance is not None and maxd > tolerance:
            raise InternalInconsistencyError(
                f"face {self.vertex_string()}: vertex {maxd} off the face plane")
        return maxd


class HullFaceList:
    """Однозв'язний список граней, створених за один крок (через HullFace.next)."""

    def __init__(self):
        self.head: Optional[HullFace] = None
        self.tail: Optional[HullFace] = None

    def clear(self) -> None:
        self.head = self.tail = None

    def add(self, face: HullFace) -> None:
        if self.head is None:
            self.head = face
        else:
            self.tail.next = face
        face.next = None
        self.tail = face

    def first(self) -> Optional[HullFace]:
        return self.head

    def is_empty(self) -> bool:
        return self.head is None

    def __iter__(self) -> Iterator[HullFace]:
        face = self.head
        while face is not None:
            yield face
            face = face.next
