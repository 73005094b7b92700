"""Collision primitives and hit tests between lines, planes, triangles, spheres and boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

from puttsim.math3d import Vector3


@dataclass(frozen=True)
class Line:
    """An infinite line through a point along a direction."""

    point: Vector3
    vec: Vector3


@dataclass(frozen=True)
class Plane:
    """An infinite plane through a point with a normal."""

    point: Vector3
    normal: Vector3


@dataclass(frozen=True)
class Segment:
    """A finite line segment."""

    start: Vector3
    end: Vector3


@dataclass(frozen=True)
class Polygon:
    """A triangle."""

    p0: Vector3
    p1: Vector3
    p2: Vector3


@dataclass(frozen=True)
class Sphere:
    center: Vector3
    radius: float


@dataclass(frozen=True)
class AABB:
    """An axis-aligned bounding box."""

    min: Vector3 = field(default_factory=Vector3)
    max: Vector3 = field(default_factory=Vector3)


def dot(v1: Vector3, v2: Vector3) -> float:
    return v1.dot(v2)


def cross(v1: Vector3, v2: Vector3) -> Vector3:
    return v1.cross(v2)


def line_hits_plane(line: Line, plane: Plane) -> bool:
    """A line misses a plane only when parallel to it and off it."""
    return dot(plane.point - line.point, plane.normal) == 0 or dot(line.vec, plane.normal) != 0


def segment_hits_plane(segment: Segment, plane: Plane) -> bool:
    """True when the segment's ends lie on opposite sides of the plane or touch it."""
    return (
        dot(segment.start - plane.point, plane.normal)
        * dot(segment.end - plane.point, plane.normal)
        <= 0
    )


def line_polygon_contact(line: Line, polygon: Polygon) -> Optional[Vector3]:
    """Point where the line crosses the triangle, or None."""
    normal = polygon_normal(polygon)
    denom = dot(normal, line.vec)
    if abs(denom) < 1e-6:
        return None
    d = dot(normal, polygon.p0)
    t = (d - dot(normal, line.point)) / denom
    contact = line.point + t * line.vec
    return contact if point_in_triangle(contact, polygon) else None


def segment_polygon_contact(segment: Segment, polygon: Polygon) -> Optional[Vector3]:
    """Point where the segment crosses the triangle, or None."""
    plane = Plane(polygon.p0, polygon_normal(polygon))
    if not segment_hits_plane(segment, plane):
        return None
    direction = segment.end - segment.start
    denom = dot(plane.normal, direction)
    if denom == 0:
        return None
    t = dot(plane.normal, plane.point - segment.start) / denom
    if not 0.0 <= t <= 1.0:
        return None
    contact = segment.start + t * direction
    return contact if point_in_triangle(contact, polygon) else None


def sphere_hits_plane(sphere: Sphere, plane: Plane) -> bool:
    return distance_point_to_plane(sphere.center, plane) <= sphere.radius


def sphere_polygon_contact(sphere: Sphere, polygon: Polygon) -> Optional[Vector3]:
    """Contact point between a sphere and a triangle, or None."""
    plane = Plane(polygon.p0, polygon_normal(polygon))
    if distance_point_to_plane(sphere.center, plane) > sphere.radius:
        return None

    projected = project_point_to_plane(sphere.center, plane)
    if point_in_triangle(projected, polygon):
        return projected

    for edge in (
        Segment(polygon.p0, polygon.p1),
        Segment(polygon.p1, polygon.p2),
        Segment(polygon.p2, polygon.p0),
    ):
        closest = closest_point_on_segment(sphere.center, edge)
        if (sphere.center - closest).length() <= sphere.radius:
            return closest
    return None


def sphere_sphere_contact(sphere1: Sphere, sphere2: Sphere) -> Optional[Vector3]:
    """Contact point on sphere2's surface facing sphere1, or None if they do not overlap."""
    len2 = (sphere1.center - sphere2.center).length_squared()
    r2 = (sphere1.radius + sphere2.radius) ** 2
    if r2 > len2:
        v = (sphere1.center - sphere2.center).normalized()
        return sphere2.center + v * sphere2.radius
    return None


def aabb_overlap(a: AABB, b: AABB) -> bool:
    return (
        a.max.x >= b.min.x
        and a.min.x <= b.max.x
        and a.max.y >= b.min.y
        and a.min.y <= b.max.y
        and a.max.z >= b.min.z
        and a.min.z <= b.max.z
    )


def closest_point_on_segment(point: Vector3, segment: Segment) -> Vector3:
    vec = segment.end - segment.start
    r2 = vec.length_squared()
    tt = -dot(vec, segment.start - point)
    if tt < 0:
        return segment.start
    if tt > r2:
        return segment.end
    if r2 == 0.0:
        return segment.start
    t = min(max((point - segment.start).dot(vec) / r2, 0.0), 1.0)
    return segment.start + t * vec


def distance_squared_point_to_segment(point: Vector3, segment: Segment) -> float:
    return (point - closest_point_on_segment(point, segment)).length_squared()


def distance_point_to_segment(point: Vector3, segment: Segment) -> float:
    return (point - closest_point_on_segment(point, segment)).length()


def distance_point_to_plane(point: Vector3, plane: Plane) -> float:
    """Signed offset along the normal divided by the normal's squared length, made absolute."""
    return abs(dot(point - plane.point, plane.normal) / dot(plane.normal, plane.normal))


def project_point_to_plane(point: Vector3, plane: Plane) -> Vector3:
    t = -dot(point - plane.point, plane.normal) / dot(plane.normal, plane.normal)
    return point + plane.normal * t


def point_in_triangle(point: Vector3, polygon: Polygon) -> bool:
    ab = polygon.p1 - polygon.p0
    bc = polygon.p2 - polygon.p1
    ca = polygon.p0 - polygon.p2
    normal = cross(ab, bc)
    edges = (
        (ab, point - polygon.p0),
        (bc, point - polygon.p1),
        (ca, point - polygon.p2),
    )
    return all(cross(edge, to_point).dot(normal) >= 0 for edge, to_point in edges)


def closest_point_on_triangle(point: Vector3, polygon: Polygon) -> Vector3:
    plane = Plane(polygon.p0, polygon_normal(polygon))
    projected = project_point_to_plane(point, plane)
    if point_in_triangle(projected, polygon):
        return projected

    p1 = closest_point_on_segment(point, Segment(polygon.p0, polygon.p1))
    p2 = closest_point_on_segment(point, Segment(polygon.p1, polygon.p2))
    p3 = closest_point_on_segment(point, Segment(polygon.p2, polygon.p0))
    d1 = (point - p1).length_squared()
    d2 = (point - p2).length_squared()
    d3 = (point - p3).length_squared()
    if d1 < d2:
        return p1 if d1 < d3 else p3
    return p2 if d2 < d3 else p3


def polygon_normal(polygon: Polygon) -> Vector3:
    return cross(polygon.p1 - polygon.p0, polygon.p2 - polygon.p0).normalized()


def move_sphere_along_segment(
    segment: Segment, radius: float, polygon: Polygon, contact: Vector3
) -> Tuple[Vector3, float]:
    """Where along the segment a sphere first touches the contact point, and how far that is.

    Returns the segment start and 0.0 when the segment is degenerate or never
    comes within the radius of the contact point.
    """
    direction = segment.end - segment.start
    length = direction.length()
    if length == 0.0:
        return segment.start, 0.0
    direction = direction.normalized()

    offset = segment.start - contact
    b = 2.0 * dot(offset, direction)
    c = offset.length_squared() - radius * radius
    discriminant = b * b - 4.0 * c
    if discriminant < 0.0:
        return segment.start, 0.0

    root = math.sqrt(discriminant)
    t = min((-b + root) / 2.0, (-b - root) / 2.0)
    return segment.start + t * direction, t


def move_sphere_out(sphere: Sphere, polygon: Polygon, contact: Vector3) -> Vector3:
    """Centre pushed back so the sphere just touches the contact point."""
    v = (sphere.center - contact).normalized()
    return contact + v * sphere.radius


def make_aabb(center: Vector3, width: float, height: int, depth: int) -> AABB:
    """Box centred on a point; height and depth are whole numbers, truncated."""
    width = abs(width)
    height = abs(int(height))
    depth = abs(int(depth))
    half = Vector3(width / 2.0, height / 2.0, depth / 2.0)
    return AABB(center - half, center + half)