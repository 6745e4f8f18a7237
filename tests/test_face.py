import math

import pytest

from quickhull3d.errors import InternalInconsistencyError
from quickhull3d.face import FaceStatus, HullFace, HullFaceList
from quickhull3d.geom import Pt
from quickhull3d.halfedge import HalfEdge
from quickhull3d.vertex import Vertex


def approx_pt(p, q, eps=1e-12):
    return all(math.isclose(a, b, abs_tol=eps) for a, b in zip(p, q))


def link_opposites(faces):
    """Зшити протилежні half-edge у замкненій сітці (шукаємо ребро tail/head навпаки)."""
    for face in faces:
        for he in face.edges():
            if he.opposite is not None:
                continue
            for other in faces:
                if other is face:
                    continue
                opp = other.find_edge(he.head(), he.tail())
                if opp is not None:
                    he.set_opposite(opp)
                    break


@pytest.fixture
def square_pyramid():
    """
    Піраміда з квадратною основою; основа розбита діагоналлю b0-b2 на два
    копланарні трикутники (t1, t2). Усі грані орієнтовані назовні.
    """
    b = [Vertex(Pt(*p), i) for i, p in enumerate([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)])]
    apex = Vertex(Pt(0.5, 0.5, 1.0), 4)
    t1 = HullFace.create_triangle(b[0], b[2], b[1])
    t2 = HullFace.create_triangle(b[0], b[3], b[2])
    sides = [HullFace.create_triangle(b[i], b[(i + 1) % 4], apex) for i in range(4)]
    faces = [t1, t2, *sides]
    link_opposites(faces)
    return b, apex, t1, t2, sides


def test_create_triangle_plane():
    v = [Vertex(Pt(0.0, 0.0, 2.0), 0), Vertex(Pt(2.0, 0.0, 2.0), 1), Vertex(Pt(0.0, 2.0, 2.0), 2)]
    face = HullFace.create_triangle(*v)
    assert face.num_vertices() == 3
    assert approx_pt(face.normal, (0.0, 0.0, 1.0))
    # area: подвоєна площа трикутника
    assert face.area == pytest.approx(4.0)
    assert approx_pt(face.centroid, (2.0 / 3.0, 2.0 / 3.0, 2.0))
    assert face.plane_offset == pytest.approx(2.0)
    assert face.distance_to_plane(Pt(5.0, -3.0, 3.5)) == pytest.approx(1.5)
    assert face.distance_to_plane(Pt(0.1, 0.1, 0.0)) == pytest.approx(-2.0)
    assert face.mark is FaceStatus.VISIBLE


def test_create_polygon():
    verts = [Vertex(Pt(*p), i) for i, p in enumerate([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)])]
    face = HullFace.create(verts, [0, 1, 2, 3])
    assert face.num_vertices() == 4
    assert approx_pt(face.normal, (0.0, 0.0, 1.0))
    assert face.area == pytest.approx(2.0)
    assert approx_pt(face.centroid, (0.5, 0.5, 0.0))
    assert face.distance_to_plane(Pt(0.3, 0.3, 3.0)) == pytest.approx(3.0)
    assert face.vertex_indices() == [0, 1, 2, 3]
    assert face.vertex_string() == "0 1 2 3"


def test_edge_access():
    verts = [Vertex(Pt(*p), i) for i, p in enumerate([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)])]
    face = HullFace.create(verts, [0, 1, 2, 3])
    he0 = face.first_edge()
    assert face.get_edge(0) is he0
    assert face.get_edge(1) is he0.next
    assert face.get_edge(-1) is he0.prev
    assert face.get_edge(4) is he0
    assert len(list(face.edges())) == 4

    he = face.find_edge(verts[1], verts[2])
    assert he.tail() is verts[1] and he.head() is verts[2]
    assert face.find_edge(verts[2], verts[1]) is None


def test_open_face_is_inconsistent():
    v = [Vertex(Pt(0.0, 0.0, 0.0), 0), Vertex(Pt(1.0, 0.0, 0.0), 1), Vertex(Pt(0.0, 1.0, 0.0), 2)]
    face = HullFace.create_triangle(*v)
    with pytest.raises(InternalInconsistencyError, match="unreflected"):
        face.check_consistency()


def test_closed_mesh_is_consistent(square_pyramid):
    _, _, t1, t2, sides = square_pyramid
    for face in [t1, t2, *sides]:
        assert face.check_consistency(tolerance=1e-12) == pytest.approx(0.0, abs=1e-12)


def test_broken_opposite_detected(square_pyramid):
    _, _, t1, _, sides = square_pyramid
    he = t1.first_edge()
    he.opposite.opposite = he.next
    with pytest.raises(InternalInconsistencyError, match="has opposite"):
        t1.check_consistency()


def test_deleted_neighbour_detected(square_pyramid):
    _, _, t1, t2, _ = square_pyramid
    t2.mark = FaceStatus.DELETED
    with pytest.raises(InternalInconsistencyError, match="not on hull"):
        t1.check_consistency()


def test_merge_coplanar_triangles(square_pyramid):
    b, _, t1, t2, sides = square_pyramid
    diagonal = t1.find_edge(b[0], b[2])
    assert diagonal.opposite_face() is t2

    discarded = [HullFace()]  # старий вміст має бути очищений
    assert t1.merge_adjacent_face(diagonal, discarded) == 1
    assert discarded == [t2]
    assert t2.mark is FaceStatus.DELETED

    assert t1.num_vertices() == 4
    assert t1.vertex_indices() == [0, 3, 2, 1]
    assert approx_pt(t1.normal, (0.0, 0.0, -1.0))
    assert t1.area == pytest.approx(2.0)
    assert approx_pt(t1.centroid, (0.5, 0.5, 0.0))
    assert all(he.face is t1 for he in t1.edges())
    for face in sides:
        face.check_consistency()


def test_triangulate_quad(square_pyramid):
    b, _, t1, _, sides = square_pyramid
    t1.merge_adjacent_face(t1.find_edge(b[0], b[2]), [])

    new_faces = HullFaceList()
    t1.triangulate(new_faces, 0.0)
    added = list(new_faces)
    assert len(added) == 1
    assert t1.num_vertices() == 3
    assert added[0].num_vertices() == 3
    assert sorted(t1.vertex_indices() + added[0].vertex_indices()) == [0, 0, 1, 2, 2, 3]
    for face in [t1, *added, *sides]:
        face.check_consistency()
        assert face.mark is FaceStatus.VISIBLE
    assert approx_pt(added[0].normal, (0.0, 0.0, -1.0))

    # трикутник не змінюється
    again = HullFaceList()
    t1.triangulate(again, 0.0)
    assert again.is_empty()


def test_face_list_order():
    lst = HullFaceList()
    assert lst.is_empty() and lst.first() is None
    faces = [HullFace() for _ in range(3)]
    for f in faces:
        lst.add(f)
    assert list(lst) == faces
    assert lst.first() is faces[0]
    lst.clear()
    assert list(lst) == []


def test_half_edge_basics():
    a, b_ = Vertex(Pt(0.0, 0.0, 0.0), 0), Vertex(Pt(3.0, 4.0, 0.0), 1)
    he = HalfEdge(b_)
    assert he.tail() is None
    assert he.length() == -1.0

    prev = HalfEdge(a)
    he.prev = prev
    assert he.tail() is a and he.head() is b_
    assert he.length() == pytest.approx(5.0)
    assert he.length_squared() == pytest.approx(25.0)

    opp = HalfEdge(a)
    he.set_opposite(opp)
    assert opp.opposite is he and he.opposite is opp


def _wedge(quad_neighbour: bool):
    """
    Основа з двох трикутників t1, t2 (діагональ b0-b2) під гранню c, що торкається
    обох трикутників біля b2: вершина b2 має степінь 3. c: трикутник
    (b2, b3, b1) або чотирикутник (b2, b3, q, b1). Решту закривають грані з p.
    """
    b = [Vertex(Pt(*xyz), i) for i, xyz in enumerate([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)])]
    p = Vertex(Pt(0.2, 0.2, 1.0), 4)
    t1 = HullFace.create_triangle(b[0], b[2], b[1])
    t2 = HullFace.create_triangle(b[0], b[3], b[2])
    rest = [HullFace.create_triangle(b[0], b[1], p), HullFace.create_triangle(b[3], b[0], p)]
    if quad_neighbour:
        q = Vertex(Pt(0.5, 0.5, 0.3), 5)
        c = HullFace.create([b[2], b[3], q, b[1]], [0, 1, 2, 3])
        rest += [HullFace.create_triangle(b[1], q, p), HullFace.create_triangle(q, b[3], p)]
    else:
        c = HullFace.create_triangle(b[2], b[3], b[1])
        rest.append(HullFace.create_triangle(b[1], b[3], p))
    link_opposites([t1, t2, c, *rest])
    for face in [t1, t2, c, *rest]:
        face.check_consistency()
    return b, t1, t2, c, rest


def test_merge_discards_degenerate_triangle():
    b, t1, t2, c, rest = _wedge(quad_neighbour=False)
    discarded = []
    assert t1.merge_adjacent_face(t1.find_edge(b[0], b[2]), discarded) == 2
    assert discarded == [t2, c]
    assert c.mark is FaceStatus.DELETED

    # b2 зникла з кільця, грань стала трикутником b0 b3 b1
    assert t1.vertex_indices() == [0, 3, 1]
    assert approx_pt(t1.normal, (0.0, 0.0, -1.0))
    he = t1.find_edge(b[3], b[1])
    assert he.opposite_face() is rest[2]
    for face in [t1, *rest]:
        face.check_consistency()
        assert face.mark is FaceStatus.VISIBLE


def test_merge_shrinks_polygon_neighbour():
    b, t1, t2, c, rest = _wedge(quad_neighbour=True)
    discarded = []
    assert t1.merge_adjacent_face(t1.find_edge(b[0], b[2]), discarded) == 1
    assert discarded == [t2]

    assert t1.vertex_indices() == [0, 3, 1]
    # сусід втратив вершину b2, але залишився на оболонці
    assert c.mark is FaceStatus.VISIBLE
    assert c.num_vertices() == 3
    assert c.vertex_indices() == [3, 5, 1]
    assert c.first_edge().head() is b[3]
    assert t1.find_edge(b[3], b[1]).opposite_face() is c
    for face in [t1, c, *rest]:
        face.check_consistency()
