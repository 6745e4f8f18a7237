from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, IntFlag
import logging
from typing import Dict, List, Optional, Sequence

import numpy as np

from . import config
from .errors import DegenerateInputError, InsufficientInputError, InternalInconsistencyError
from .face import FaceStatus, HullFace, HullFaceList
from .geom import MACHINE_EPS, Pt, as_point, cross, dot, norm_sq, normalize, scale, sub
from .halfedge import HalfEdge
from .vertex import Vertex, VertexList

logger = logging.getLogger(__name__)


class FaceIndexFlags(IntFlag):
    """Формат індексів у QuickHull3D.faces(); 0 — за замовчуванням."""
    CLOCKWISE = 0x1
    INDEXED_FROM_ONE = 0x2
    INDEXED_FROM_ZERO = 0x4
    POINT_RELATIVE = 0x8


class MergeType(Enum):
    NONCONVEX_WRT_LARGER_FACE = 1
    NONCONVEX = 2


@dataclass
class BuildContext:
    """
    Увесь змінний стан однієї побудови. Створюється заново на кожен build()
    і явно передається в усі внутрішні кроки; після побудови builder зберігає
    лише результат.
    """
    points: List[Vertex]
    tolerance: float = 0.0
    char_length: float = 0.0
    max_vtxs: List[Vertex] = field(default_factory=list)
    min_vtxs: List[Vertex] = field(default_factory=list)
    faces: List[HullFace] = field(default_factory=list)
    horizon: List[HalfEdge] = field(default_factory=list)
    new_faces: HullFaceList = field(default_factory=HullFaceList)
    claimed: VertexList = field(default_factory=VertexList)
    unclaimed: VertexList = field(default_factory=VertexList)
    discarded: List[HullFace] = field(default_factory=list)


class QuickHull3D:
    """
    Опукла оболонка множини 3D точок: Quickhull (Barber, Dobkin, Huhdanpaa, 1996)
    поверх half-edge сітки.

    Робастність як у qhull: грані, ребро між якими не є однозначно опуклим
    (центроїд сусіда не нижче площини більш ніж на допуск), зливаються. Тому
    грані результату — опуклі многокутники, не лише трикутники; triangulate()
    робить з них трикутники (але тонкі трикутники можуть знову не пройти check()).

    Вхід: щонайменше 4 точки, не всі копланарні (в межах допуску).
    Вихід: vertices() та faces(flags).

    Один екземпляр не можна використовувати з кількох потоків одночасно.
    """

    def __init__(
        self,
        points: Optional[Sequence] = None,
        tolerance: Optional[float] = config.AUTOMATIC_TOLERANCE,
        debug_checks: bool = config.DEBUG_CHECKS,
    ):
        self.explicit_distance_tolerance = tolerance
        self.debug_checks = debug_checks

        # Результат останньої побудови
        self.faces_list: List[HullFace] = []
        self._points: List[Vertex] = []
        self._vertex_point_indices: List[int] = []
        self._tolerance = 0.0
        self._char_length = 0.0

        if points is not None:
            self.build(points)

    # ---------------- Побудова ----------------
    def build(self, points: Sequence, num_points: Optional[int] = None) -> None:
        """
        Побудувати оболонку перших num_points точок (Pt, (x, y, z) або рядки numpy).
        InsufficientInputError — менше 4 точок; DegenerateInputError — вироджений вхід.
        """
        nump = len(points) if num_points is None else num_points
        if nump < 4:
            raise InsufficientInputError("Less than four input points specified")
        if len(points) < nump:
            raise InsufficientInputError("Point array too small for specified number of points")

        vertices = [Vertex(as_point(points[i]), i) for i in range(nump)]
        self._build_hull(BuildContext(points=vertices))

    def build_from_coords(self, coords: Sequence[float], num_points: Optional[int] = None) -> None:
        """Те саме для плаского буфера [x0, y0, z0, x1, y1, z1, ...]."""
        flat = np.asarray(coords, dtype=float).reshape(-1)
        nump = flat.size // 3 if num_points is None else num_points
        if nump < 4:
            raise InsufficientInputError("Less than four input points specified")
        if flat.size // 3 < nump:
            raise InsufficientInputError("Coordinate array too small for specified number of points")

        xyz = flat[:nump * 3].reshape(nump, 3).tolist()
        vertices = [Vertex(Pt(x, y, z), i) for i, (x, y, z) in enumerate(xyz)]
        self._build_hull(BuildContext(points=vertices))

    # ---------------- Публічний API ----------------
    @property
    def distance_tolerance(self) -> float:
        """Допуск останньої побудови (автоматичний або явний)."""
        return self._tolerance

    @property
    def num_vertices(self) -> int:
        return len(self._vertex_point_indices)

    @property
    def num_faces(self) -> int:
        return len(self.faces_list)

    @property
    def num_edges(self) -> int:
        return sum(face.num_vertices() for face in self.faces_list) // 2

    def vertices(self) -> List[Pt]:
        """Вершини оболонки у порядку, призначеному алгоритмом."""
        return [self._points[i].pnt for i in self._vertex_point_indices]

    def vertex_coords(self) -> List[float]:
        out: List[float] = []
        for p in self.vertices():
            out.extend((p.x, p.y, p.z))
        return out

    def vertex_point_indices(self) -> List[int]:
        """Індекс кожної вершини оболонки у вхідному масиві."""
        return list(self._vertex_point_indices)

    def faces(self, flags: int = 0) -> List[List[int]]:
        """
        Грані як списки індексів вершин. За замовчуванням: відносно вершин
        оболонки, з нуля, проти годинникової стрілки (ззовні).
        """
        return [self._face_indices(face, FaceIndexFlags(flags)) for face in self.faces_list]

    def triangulate(self) -> None:
        """Розбити всі не трикутні грані на трикутники (повторний виклик нічого не змінює)."""
        min_area = config.MIN_AREA_FACTOR * self._char_length * MACHINE_EPS
        new_faces = HullFaceList()
        for face in self.faces_list:
            if face.mark is FaceStatus.VISIBLE:
                face.triangulate(new_faces, min_area)
        added = 0
        for face in new_faces:
            self.faces_list.append(face)
            added += 1
        logger.debug("triangulate: %d new faces, %d total", added, len(self.faces_list))

    # ---------------- Внутрішні методи ----------------
    def _face_indices(self, face: HullFace, flags: FaceIndexFlags) -> List[int]:
        ccw = not (flags & FaceIndexFlags.CLOCKWISE)
        indexed_from_one = bool(flags & FaceIndexFlags.INDEXED_FROM_ONE)
        point_relative = bool(flags & FaceIndexFlags.POINT_RELATIVE)

        indices: List[int] = []
        hedge = face.first_edge()
        while True:
            idx = hedge.head().index
            if point_relative:
                idx = self._vertex_point_indices[idx]
            if indexed_from_one:
                idx += 1
            indices.append(idx)
            hedge = hedge.next if ccw else hedge.prev
            if hedge is face.first_edge():
                break
        return indices

    def _build_hull(self, ctx: BuildContext) -> None:
        # результат попередньої побудови більше не дійсний
        self.faces_list = []
        self._points = []
        self._vertex_point_indices = []
        self._tolerance = 0.0
        self._char_length = 0.0

        self._compute_max_and_min(ctx)
        self._create_initial_simplex(ctx)

        iterations = 0
        while True:
            eye_vtx = self._next_point_to_add(ctx)
            if eye_vtx is None:
                break
            self._add_point_to_hull(ctx, eye_vtx)
            iterations += 1
            if self.debug_checks:
                for face in ctx.faces:
                    if face.mark is FaceStatus.VISIBLE:
                        face.check_consistency()

        self._reindex_faces_and_vertices(ctx)

        self.faces_list = ctx.faces
        self._points = ctx.points
        self._tolerance = ctx.tolerance
        self._char_length = ctx.char_length
        logger.debug(
            "hull of %d points: %d vertices, %d faces after %d insertions (tolerance %g)",
            len(ctx.points), self.num_vertices, self.num_faces, iterations, ctx.tolerance,
        )

    def _compute_max_and_min(self, ctx: BuildContext) -> None:
        first = ctx.points[0]
        ctx.max_vtxs = [first, first, first]
        ctx.min_vtxs = [first, first, first]
        mx = list(first.pnt)
        mn = list(first.pnt)

        for vtx in ctx.points[1:]:
            for axis, c in enumerate(vtx.pnt):
                if c > mx[axis]:
                    mx[axis] = c
                    ctx.max_vtxs[axis] = vtx
                elif c < mn[axis]:
                    mn[axis] = c
                    ctx.min_vtxs[axis] = vtx

        ctx.char_length = max(mx[i] - mn[i] for i in range(3))
        if self.explicit_distance_tolerance is config.AUTOMATIC_TOLERANCE:
            # формула з qhull
            ctx.tolerance = 3 * MACHINE_EPS * sum(max(abs(mx[i]), abs(mn[i])) for i in range(3))
        else:
            ctx.tolerance = self.explicit_distance_tolerance

    def _create_initial_simplex(self, ctx: BuildContext) -> None:
        """
        Стартовий тетраедр:
          - v0, v1: пара екстремумів з найбільшим розмахом по одній осі;
          - v2: найдальша від прямої v0v1;
          - v3: найдальша від площини v0v1v2.
        Далі кожна інша точка йде в outside set грані, над якою вона найвище.
        """
        tol = ctx.tolerance
        points = ctx.points

        max_diff = 0.0
        imax = 0
        for i in range(3):
            diff = list(ctx.max_vtxs[i].pnt)[i] - list(ctx.min_vtxs[i].pnt)[i]
            if diff > max_diff:
                max_diff = diff
                imax = i
        if max_diff <= tol:
            raise DegenerateInputError(DegenerateInputError.COINCIDENT)

        v0 = ctx.max_vtxs[imax]
        v1 = ctx.min_vtxs[imax]

        # третя: найдальша від прямої v0v1
        u01 = normalize(sub(v1.pnt, v0.pnt))
        v2: Optional[Vertex] = None
        nrml = Pt(0.0, 0.0, 0.0)
        max_sqr = 0.0
        for vtx in points:
            xprod = cross(u01, sub(vtx.pnt, v0.pnt))
            len_sqr = norm_sq(xprod)
            if len_sqr > max_sqr and vtx is not v0 and vtx is not v1:
                max_sqr = len_sqr
                v2 = vtx
                nrml = xprod
        if max_sqr ** 0.5 <= config.DEGENERACY_FACTOR * tol:
            raise DegenerateInputError(DegenerateInputError.COLINEAR)

        # нормаль строго перпендикулярна до u01, інакше похибка при v2 близько до прямої
        nrml = normalize(nrml)
        nrml = normalize(sub(nrml, scale(u01, dot(nrml, u01))))

        # четверта: найдальша від площини
        v3: Optional[Vertex] = None
        max_dist = 0.0
        d0 = dot(v2.pnt, nrml)
        for vtx in points:
            dist = abs(dot(vtx.pnt, nrml) - d0)
            if dist > max_dist and vtx is not v0 and vtx is not v1 and vtx is not v2:
                max_dist = dist
                v3 = vtx
        if max_dist <= config.DEGENERACY_FACTOR * tol:
            raise DegenerateInputError(DegenerateInputError.COPLANAR)

        logger.debug("initial simplex: %d %d %d %d", v0.index, v1.index, v2.index, v3.index)

        if dot(v3.pnt, nrml) - d0 < 0:
            tris = [
                HullFace.create_triangle(v0, v1, v2),
                HullFace.create_triangle(v3, v1, v0),
                HullFace.create_triangle(v3, v2, v1),
                HullFace.create_triangle(v3, v0, v2),
            ]
            for i in range(3):
                k = (i + 1) % 3
                tris[i + 1].get_edge(1).set_opposite(tris[k + 1].get_edge(0))
                tris[i + 1].get_edge(2).set_opposite(tris[0].get_edge(k))
        else:
            tris = [
                HullFace.create_triangle(v0, v2, v1),
                HullFace.create_triangle(v3, v0, v1),
                HullFace.create_triangle(v3, v1, v2),
                HullFace.create_triangle(v3, v2, v0),
            ]
            for i in range(3):
                k = (i + 1) % 3
                tris[i + 1].get_edge(0).set_opposite(tris[k + 1].get_edge(1))
                tris[i + 1].get_edge(2).set_opposite(tris[0].get_edge((3 - i) % 3))

        ctx.faces.extend(tris)

        simplex = (v0, v1, v2, v3)
        for vtx in points:
            if any(vtx is s for s in simplex):
                continue
            max_dist = tol
            max_face: Optional[HullFace] = None
            for face in tris:
                dist = face.distance_to_plane(vtx.pnt)
                if dist > max_dist:
                    max_face = face
                    max_dist = dist
            # під усіма чотирма площинами, вершиною не стане
            if max_face is not None:
                self._add_point_to_face(ctx, vtx, max_face)

    # ---- outside sets ----
    def _add_point_to_face(self, ctx: BuildContext, vtx: Vertex, face: HullFace) -> None:
        vtx.face = face
        if face.outside is None:
            ctx.claimed.add(vtx)
        else:
            ctx.claimed.insert_before(vtx, face.outside)
        face.outside = vtx

    def _remove_point_from_face(self, ctx: BuildContext, vtx: Vertex, face: HullFace) -> None:
        if vtx is face.outside:
            if vtx.next is not None and vtx.next.face is face:
                face.outside = vtx.next
            else:
                face.outside = None
        ctx.claimed.delete(vtx)

    def _remove_all_points_from_face(self, ctx: BuildContext, face: HullFace) -> Optional[Vertex]:
        """Вирізати outside set грані з claimed; повертає голову відрізаного ланцюжка."""
        first = face.outside
        if first is None:
            return None
        end = first
        while end.next is not None and end.next.face is face:
            end = end.next
        ctx.claimed.delete_range(first, end)
        end.next = None
        face.outside = None
        return first

    def _delete_face_points(self, ctx: BuildContext, face: HullFace, absorbing_face: Optional[HullFace]) -> None:
        face_vtxs = self._remove_all_points_from_face(ctx, face)
        if face_vtxs is None:
            return
        if absorbing_face is None:
            ctx.unclaimed.add_all(face_vtxs)
            return

        vtx = face_vtxs
        while vtx is not None:
            vtx_next = vtx.next
            dist = absorbing_face.distance_to_plane(vtx.pnt)
            if dist > ctx.tolerance:
                self._add_point_to_face(ctx, vtx, absorbing_face)
            else:
                ctx.unclaimed.add(vtx)
            vtx = vtx_next

    def _resolve_unclaimed_points(self, ctx: BuildContext) -> None:
        early_exit = config.EARLY_EXIT_FACTOR * ctx.tolerance
        for vtx in ctx.unclaimed:
            max_dist = ctx.tolerance
            max_face: Optional[HullFace] = None
            for new_face in ctx.new_faces:
                if new_face.mark is FaceStatus.VISIBLE:
                    dist = new_face.distance_to_plane(vtx.pnt)
                    if dist > max_dist:
                        max_dist = dist
                        max_face = new_face
                    if max_dist > early_exit:
                        break
            if max_face is not None:
                self._add_point_to_face(ctx, vtx, max_face)

    # ---- злиття ----
    @staticmethod
    def _opp_face_distance(he: HalfEdge) -> float:
        return he.face.distance_to_plane(he.opposite.face.centroid)

    def _do_adjacent_merge(self, ctx: BuildContext, face: HullFace, merge_type: MergeType) -> bool:
        tol = ctx.tolerance
        hedge = face.first_edge()
        convex = True
        while True:
            opp_face = hedge.opposite_face()
            merge = False

            if merge_type is MergeType.NONCONVEX:
                # зливаємо, якщо ребро неопукле з будь-якого боку
                if self._opp_face_distance(hedge) > -tol or self._opp_face_distance(hedge.opposite) > -tol:
                    merge = True
            else:
                # зливаємо, якщо неопукле відносно більшої грані; інакше лише
                # позначаємо для другого проходу
                if face.area > opp_face.area:
                    if self._opp_face_distance(hedge) > -tol:
                        merge = True
                    elif self._opp_face_distance(hedge.opposite) > -tol:
                        convex = False
                else:
                    if self._opp_face_distance(hedge.opposite) > -tol:
                        merge = True
                    elif self._opp_face_distance(hedge) > -tol:
                        convex = False

            if merge:
                numd = face.merge_adjacent_face(hedge, ctx.discarded)
                logger.debug("merged face %s, %d discarded", face.vertex_string(), numd)
                for discarded in ctx.discarded:
                    self._delete_face_points(ctx, discarded, face)
                return True

            hedge = hedge.next
            if hedge is face.first_edge():
                break

        if not convex:
            face.mark = FaceStatus.NON_CONVEX
        return False

    # ---- горизонт ----
    def _calculate_horizon(self, ctx: BuildContext, eye_pnt: Pt, face: HullFace) -> None:
        """
        Обхід у глибину від грані очної точки по всіх гранях, які вона бачить
        (вище за допуск). Видимі грані видаляються, їхні точки йдуть у unclaimed;
        ребра на межі з невидимими гранями — горизонт, у порядку обходу.
        Явний стек замість рекурсії, порядок той самий, що й у рекурсивному обході.
        """
        tol = ctx.tolerance

        def enter(f: HullFace, edge0: Optional[HalfEdge]) -> List[Optional[HalfEdge]]:
            self._delete_face_points(ctx, f, None)
            f.mark = FaceStatus.DELETED
            if edge0 is None:
                edge0 = f.get_edge(0)
                return [edge0, edge0]
            return [edge0, edge0.next]

        stack = [enter(face, None)]
        while stack:
            frame = stack[-1]
            edge0, edge = frame
            if edge is None:
                stack.pop()
                continue
            nxt = edge.next
            frame[1] = None if nxt is edge0 else nxt

            opp_face = edge.opposite_face()
            if opp_face.mark is FaceStatus.VISIBLE:
                if opp_face.distance_to_plane(eye_pnt) > tol:
                    stack.append(enter(opp_face, edge.opposite))
                else:
                    ctx.horizon.append(edge)

    def _add_adjoining_face(self, ctx: BuildContext, eye_vtx: Vertex, he: HalfEdge) -> HalfEdge:
        face = HullFace.create_triangle(eye_vtx, he.tail(), he.head())
        ctx.faces.append(face)
        face.get_edge(-1).set_opposite(he.opposite)
        return face.get_edge(0)

    def _add_new_faces(self, ctx: BuildContext, eye_vtx: Vertex) -> None:
        ctx.new_faces.clear()

        hedge_side_prev: Optional[HalfEdge] = None
        hedge_side_begin: Optional[HalfEdge] = None

        for horizon_he in ctx.horizon:
            hedge_side = self._add_adjoining_face(ctx, eye_vtx, horizon_he)
            if hedge_side_prev is not None:
                hedge_side.next.set_opposite(hedge_side_prev)
            else:
                hedge_side_begin = hedge_side
            ctx.new_faces.add(hedge_side.face)
            hedge_side_prev = hedge_side
        hedge_side_begin.next.set_opposite(hedge_side_prev)

    # ---- основний цикл ----
    def _next_point_to_add(self, ctx: BuildContext) -> Optional[Vertex]:
        """Найвіддаленіша точка outside set першої грані, що має такі точки."""
        if ctx.claimed.is_empty():
            return None
        eye_face = ctx.claimed.first().face
        eye_vtx: Optional[Vertex] = None
        max_dist = 0.0
        vtx = eye_face.outside
        while vtx is not None and vtx.face is eye_face:
            dist = eye_face.distance_to_plane(vtx.pnt)
            if dist > max_dist:
                max_dist = dist
                eye_vtx = vtx
            vtx = vtx.next
        return eye_vtx

    def _add_point_to_hull(self, ctx: BuildContext, eye_vtx: Vertex) -> None:
        ctx.horizon.clear()
        ctx.unclaimed.clear()

        logger.debug("adding point %d", eye_vtx.index)
        self._remove_point_from_face(ctx, eye_vtx, eye_vtx.face)
        self._calculate_horizon(ctx, eye_vtx.pnt, eye_vtx.face)
        self._add_new_faces(ctx, eye_vtx)

        # 1-й прохід: неопуклі відносно більшої з двох граней
        for face in ctx.new_faces:
            if face.mark is FaceStatus.VISIBLE:
                while self._do_adjacent_merge(ctx, face, MergeType.NONCONVEX_WRT_LARGER_FACE):
                    pass

        # 2-й прохід: неопуклі відносно будь-якої з граней
        for face in ctx.new_faces:
            if face.mark is FaceStatus.NON_CONVEX:
                face.mark = FaceStatus.VISIBLE
                while self._do_adjacent_merge(ctx, face, MergeType.NONCONVEX):
                    pass

        self._resolve_unclaimed_points(ctx)

    def _reindex_faces_and_vertices(self, ctx: BuildContext) -> None:
        for vtx in ctx.points:
            vtx.index = -1

        # прибрати неактивні грані, позначити їхні вершини
        ctx.faces = [face for face in ctx.faces if face.mark is FaceStatus.VISIBLE]
        for face in ctx.faces:
            for he in face.edges():
                he.head().index = 0

        self._vertex_point_indices = []
        for i, vtx in enumerate(ctx.points):
            if vtx.index == 0:
                vtx.index = len(self._vertex_point_indices)
                self._vertex_point_indices.append(i)

    # ---------------- Діагностика / Експорт ----------------
    def check(self, tolerance: Optional[float] = None) -> bool:
        """
        Самоперевірка оболонки:
          - кожна грань узгоджена (порушення структури — InternalInconsistencyError);
          - кожне ребро опукле в межах допуску, немає зайвих вершин;
          - жодна вхідна точка не вище грані більш ніж на 10·tolerance.
        Геометричні порушення пишуться в лог, результат — False.
        """
        tol = self._tolerance if tolerance is None else tolerance
        point_tol = config.POINT_CHECK_FACTOR * tol

        convex = True
        for face in self.faces_list:
            if face.mark is FaceStatus.VISIBLE and not self._check_face_convexity(face, self._tolerance):
                convex = False
        if not convex:
            return False

        for i, vtx in enumerate(self._points):
            for face in self.faces_list:
                if face.mark is FaceStatus.VISIBLE:
                    dist = face.distance_to_plane(vtx.pnt)
                    if dist > point_tol:
                        logger.warning("Point %d %g above face %s", i, dist, face.vertex_string())
                        return False
        return True

    def _check_face_convexity(self, face: HullFace, tol: float) -> bool:
        for he in face.edges():
            face.check_consistency()
            dist = self._opp_face_distance(he)
            if dist > tol:
                logger.warning("Edge %s non-convex by %g", he.vertex_string(), dist)
                return False
            dist = self._opp_face_distance(he.opposite)
            if dist > tol:
                logger.warning("Opposite edge %s non-convex by %g", he.opposite.vertex_string(), dist)
                return False
            if he.next.opposite_face() is he.opposite_face():
                logger.warning("Redundant vertex %d in face %s", he.head().index, face.vertex_string())
                return False
        return True

    def validate(self) -> Dict[str, object]:
        """
        Звіт про коректність сітки (порожні списки = все ок):
          - bad_faces: грані, що не пройшли check_consistency, з причиною;
          - nonconvex_edges: ребра, де центроїд сусіда вище площини на > tolerance;
          - points_outside: вхідні точки вище якоїсь грані на > tolerance;
          - euler: V - E + F (для опуклого многогранника 2).
        """
        tol = self._tolerance
        faces = [f for f in self.faces_list if f.mark is FaceStatus.VISIBLE]

        bad_faces: List[tuple] = []
        nonconvex: List[tuple] = []
        max_dev = 0.0
        for face in faces:
            try:
                max_dev = max(max_dev, face.check_consistency())
            except InternalInconsistencyError as exc:
                bad_faces.append((face.vertex_string(), str(exc)))
                continue
            for he in face.edges():
                dist = self._opp_face_distance(he)
                if dist > tol:
                    nonconvex.append((he.vertex_string(), dist))

        outside: List[tuple] = []
        for i, vtx in enumerate(self._points):
            for face in faces:
                dist = face.distance_to_plane(vtx.pnt)
                if dist > tol:
                    outside.append((i, face.vertex_string(), dist))

        num_edges = sum(f.num_vertices() for f in faces) // 2
        return {
            "faces": len(faces),
            "vertices": self.num_vertices,
            "edges": num_edges,
            "euler": self.num_vertices - num_edges + len(faces),
            "bad_faces": bad_faces,
            "nonconvex_edges": nonconvex,
            "points_outside": outside,
            "max_plane_deviation": max_dev,
        }

    def to_off(self) -> str:
        """Експорт оболонки у формат OFF (вершини оболонки, грані будь-якої довжини)."""
        faces = self.faces()
        lines = ["OFF", f"{self.num_vertices} {len(faces)} 0"]
        for p in self.vertices():
            lines.append(f"{p.x} {p.y} {p.z}")
        for idxs in faces:
            lines.append(" ".join(str(i) for i in [len(idxs), *idxs]))
        return "\n".join(lines)

    def write_off(self, path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_off())
