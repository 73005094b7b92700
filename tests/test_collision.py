import math

import pytest

from puttsim.collision import (
    AABB,
    Line,
    Plane,
    Polygon,
    Segment,
    Sphere,
    aabb_overlap,
    closest_point_on_segment,
    closest_point_on_triangle,
    cross,
    distance_point_to_plane,
    distance_point_to_segment,
    distance_squared_point_to_segment,
    dot,
    line_hits_plane,
    line_polygon_contact,
    make_aabb,
    move_sphere_along_segment,
    move_sphere_out,
    point_in_triangle,
    polygon_normal,
    project_point_to_plane,
    segment_hits_plane,
    segment_polygon_contact,
    sphere_hits_plane,
    sphere_polygon_contact,
    sphere_sphere_contact,
)
from puttsim.math3d import Vector3

TRI = Polygon(Vector3(0, 0, 0), Vector3(0, 0, 4), Vector3(4, 0, 0))
FLOOR = Plane(Vector3(0, 0, 0), Vector3(0, 1, 0))


def approx_vec(actual, expected):
    assert actual is not None
    assert actual.x == pytest.approx(expected.x, abs=1e-9)
    assert actual.y == pytest.approx(expected.y, abs=1e-9)
    assert actual.z == pytest.approx(expected.z, abs=1e-9)


def test_dot_and_cross_helpers():
    a, b = Vector3(1, 2, 3), Vector3(4, -1, 2)
    assert dot(a, b) == a.dot(b)
    assert dot(cross(a, b), a) == pytest.approx(0.0)


def test_polygon_normal_is_unit_and_perpendicular():
    n = polygon_normal(TRI)
    assert n.length() == pytest.approx(1.0)
    assert n.dot(TRI.p1 - TRI.p0) == pytest.approx(0.0)
    assert n.dot(TRI.p2 - TRI.p0) == pytest.approx(0.0)
    assert n.y > 0


def test_line_hits_plane():
    assert line_hits_plane(Line(Vector3(0, 5, 0), Vector3(1, -1, 0)), FLOOR)
    assert not line_hits_plane(Line(Vector3(0, 5, 0), Vector3(1, 0, 0)), FLOOR)
    assert line_hits_plane(Line(Vector3(0, 0, 0), Vector3(1, 0, 0)), FLOOR)


def test_segment_hits_plane():
    assert segment_hits_plane(Segment(Vector3(0, 1, 0), Vector3(0, -1, 0)), FLOOR)
    assert segment_hits_plane(Segment(Vector3(0, 1, 0), Vector3(0, 0, 0)), FLOOR)
    assert not segment_hits_plane(Segment(Vector3(0, 1, 0), Vector3(0, 2, 0)), FLOOR)


def test_line_polygon_contact():
    approx_vec(line_polygon_contact(Line(Vector3(1, 7, 1), Vector3(0, 1, 0)), TRI), Vector3(1, 0, 1))
    assert line_polygon_contact(Line(Vector3(5, 7, 5), Vector3(0, 1, 0)), TRI) is None
    assert line_polygon_contact(Line(Vector3(1, 7, 1), Vector3(1, 0, 0)), TRI) is None


def test_segment_polygon_contact():
    hit = segment_polygon_contact(Segment(Vector3(1, 3, 1), Vector3(1, -1, 1)), TRI)
    approx_vec(hit, Vector3(1, 0, 1))
    assert segment_polygon_contact(Segment(Vector3(1, 3, 1), Vector3(1, 1, 1)), TRI) is None
    assert segment_polygon_contact(Segment(Vector3(1, 0, 1), Vector3(2, 0, 1)), TRI) is None


def test_sphere_hits_plane():
    assert sphere_hits_plane(Sphere(Vector3(0, 0.5, 0), 1.0), FLOOR)
    assert not sphere_hits_plane(Sphere(Vector3(0, 2, 0), 1.0), FLOOR)


def test_sphere_polygon_contact_inside_and_edge():
    approx_vec(sphere_polygon_contact(Sphere(Vector3(1, 0.3, 1), 0.5), TRI), Vector3(1, 0, 1))
    approx_vec(sphere_polygon_contact(Sphere(Vector3(-0.3, 0.1, 1), 0.5), TRI), Vector3(0, 0, 1))
    assert sphere_polygon_contact(Sphere(Vector3(1, 3, 1), 0.5), TRI) is None
    assert sphere_polygon_contact(Sphere(Vector3(-3, 0.1, 1), 0.5), TRI) is None


def test_sphere_sphere_contact():
    approx_vec(
        sphere_sphere_contact(Sphere(Vector3(0, 0, 0), 1.0), Sphere(Vector3(1.5, 0, 0), 1.0)),
        Vector3(0.5, 0, 0),
    )
    assert sphere_sphere_contact(Sphere(Vector3(0, 0, 0), 1.0), Sphere(Vector3(2, 0, 0), 1.0)) is None


def test_aabb_overlap():
    a = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
    assert aabb_overlap(a, AABB(Vector3(1, 1, 1), Vector3(2, 2, 2)))
    assert not aabb_overlap(a, AABB(Vector3(1.1, 0, 0), Vector3(2, 1, 1)))
    assert not aabb_overlap(a, AABB(Vector3(0, 0, -3), Vector3(1, 1, -2)))


def test_make_aabb_centred_and_truncated():
    c = Vector3(1, 2, 3)
    box = make_aabb(c, -2.0, 3.7, 4)
    approx_vec((box.min + box.max) / 2, c)
    assert box.max.x - box.min.x == pytest.approx(2.0)
    assert box.max.y - box.min.y == pytest.approx(3.0)
    assert box.max.z - box.min.z == pytest.approx(4.0)


def test_closest_point_on_segment():
    seg = Segment(Vector3(0, 0, 0), Vector3(4, 0, 0))
    assert closest_point_on_segment(Vector3(-2, 1, 0), seg) == seg.start
    assert closest_point_on_segment(Vector3(9, 1, 0), seg) == seg.end
    approx_vec(closest_point_on_segment(Vector3(1, 3, 0), seg), Vector3(1, 0, 0))
    degenerate = Segment(Vector3(1, 1, 1), Vector3(1, 1, 1))
    assert closest_point_on_segment(Vector3(5, 5, 5), degenerate) == degenerate.start


def test_distances_to_segment_agree():
    seg = Segment(Vector3(0, 0, 0), Vector3(4, 0, 0))
    p = Vector3(2, 3, 4)
    d = distance_point_to_segment(p, seg)
    assert d * d == pytest.approx(distance_squared_point_to_segment(p, seg))
    assert d == pytest.approx((p - closest_point_on_segment(p, seg)).length())


def test_distance_to_plane_divides_by_squared_normal():
    plane = Plane(Vector3(0, 0, 0), Vector3(0, 2, 0))
    assert distance_point_to_plane(Vector3(0, 4, 0), plane) == pytest.approx(2.0)
    assert distance_point_to_plane(Vector3(3, -4, 1), FLOOR) == pytest.approx(4.0)


def test_project_point_lands_on_plane():
    plane = Plane(Vector3(1, 2, 3), Vector3(1, 1, 0.5))
    q = project_point_to_plane(Vector3(5, -2, 7), plane)
    assert dot(q - plane.point, plane.normal) == pytest.approx(0.0)


def test_point_in_triangle():
    assert point_in_triangle(Vector3(1, 0, 1), TRI)
    assert point_in_triangle(TRI.p0, TRI)
    assert not point_in_triangle(Vector3(3, 0, 3), TRI)
    assert not point_in_triangle(Vector3(-1, 0, 1), TRI)


def test_closest_point_on_triangle():
    approx_vec(closest_point_on_triangle(Vector3(1, 5, 1), TRI), Vector3(1, 0, 1))
    approx_vec(closest_point_on_triangle(Vector3(-1, 0, -1), TRI), TRI.p0)


def test_move_sphere_along_segment_stops_at_radius():
    seg = Segment(Vector3(1, 3, 1), Vector3(1, -1, 1))
    contact = Vector3(1, 0, 1)
    pos, dist = move_sphere_along_segment(seg, 0.5, TRI, contact)
    assert (pos - contact).length() == pytest.approx(0.5)
    assert pos.y > contact.y
    assert dist == pytest.approx((pos - seg.start).length())


def test_move_sphere_along_segment_degenerate_cases():
    start = Vector3(1, 3, 1)
    assert move_sphere_along_segment(Segment(start, start), 0.5, TRI, Vector3()) == (start, 0.0)
    far = Segment(start, Vector3(2, 3, 1))
    assert move_sphere_along_segment(far, 0.5, TRI, Vector3(1, 0, 1)) == (start, 0.0)


def test_move_sphere_out():
    sphere = Sphere(Vector3(1, 0.2, 1), 0.5)
    contact = Vector3(1, 0, 1)
    moved = move_sphere_out(sphere, TRI, contact)
    assert (moved - contact).length() == pytest.approx(0.5)
    direction = (moved - contact).normalized()
    assert direction.dot((sphere.center - contact).normalized()) == pytest.approx(1.0)
    assert not math.isnan(moved.y)