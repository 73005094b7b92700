"""Height-mapped terrain made of a grid of quads."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

from puttsim.gameobject import GameObject
from puttsim.math3d import Vector3, srt_matrix, transform

_UP = Vector3(0.0, 1.0, 0.0)
_CORNERS = (
    ((-0.5, 0.5), (0.0, 0.0)),
    ((0.5, 0.5), (1.0, 0.0)),
    ((-0.5, -0.5), (0.0, 1.0)),
    ((-0.5, -0.5), (0.0, 1.0)),
    ((0.5, 0.5), (1.0, 0.0)),
    ((0.5, -0.5), (1.0, 1.0)),
)


@dataclass
class Vertex:
    position: Vector3
    normal: Vector3 = _UP
    color: Tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    uv: Tuple[float, float] = (0.0, 0.0)


def _set_height(vertex: Vertex, h: float) -> None:
    p = vertex.position
    vertex.position = Vector3(p.x, h, p.z)


def build_terrain(
    size_x: int,
    size_z: int,
    heightmap: Optional[Sequence[Sequence[int]]] = None,
    height_scale: float = 15.0,
) -> List[Vertex]:
    """Two triangles per grid cell, heights sampled from a grayscale grid if one is given."""
    half_x = size_x // 2
    half_z = size_z // 2
    vertices: List[Vertex] = []
    for z in range(size_z):
        for x in range(size_x):
            for (dx, dz), uv in _CORNERS:
                vertices.append(
                    Vertex(
                        position=Vector3(dx + x - half_x, 0.0, dz - z + half_z),
                        uv=uv,
                    )
                )

    if not heightmap:
        return vertices

    height = len(heightmap)
    width = len(heightmap[0])
    row = size_x * 6
    for z in range(size_z):
        for x in range(size_x):
            pic_x = int(x * float(width) / size_x)
            pic_y = int(z * float(height) / size_z)
            h = heightmap[pic_y][pic_x] / height_scale
            n = z * size_z * 6 + x * 6
            _set_height(vertices[n], h)
            if x != 0:
                _set_height(vertices[n - 2], h)
                _set_height(vertices[n - 5], h)
            if z != 0:
                _set_height(vertices[n - row + 2], h)
                _set_height(vertices[n - row + 3], h)
            if x != 0 and z != 0:
                _set_height(vertices[n - row - 1], h)

    for z in range(size_z):
        for x in range(size_x):
            n = z * size_z * 6 + x * 6
            for base in (n, n + 3):
                a, b, c = vertices[base : base + 3]
                normal = (b.position - a.position).cross(c.position - a.position).normalized()
                for v in (a, b, c):
                    v.normal = normal
    return vertices


class Ground(GameObject):
    """The course terrain; its vertices are kept in world space for collision tests."""

    SIZE = 30
    HEIGHT_SCALE = 15.0

    def __init__(
        self,
        game: Optional[Any] = None,
        camera: Optional[Any] = None,
        heightmap: Optional[Sequence[Sequence[int]]] = None,
    ) -> None:
        super().__init__(game, camera)
        self.heightmap = heightmap
        self.size_x = self.SIZE
        self.size_z = self.SIZE
        self.current_time = 0.0
        self._vertices: List[Vertex] = []
        self._start: Optional[float] = None

    def init(self) -> None:
        self._vertices = build_terrain(
            self.size_x, self.size_z, self.heightmap, self.HEIGHT_SCALE
        )
        self.position = Vector3(self.position.x, -0.1, self.position.z)
        self.scale = Vector3(5.0, self.scale.y, 5.0)

        world = srt_matrix(self.scale, self.rotation, self.position)
        for v in self._vertices:
            v.position = transform(v.position, world)
            v.normal = transform(v.normal, world)

    def update(self) -> None:
        """Track seconds elapsed since the first update."""
        now = time.monotonic()
        if self._start is None:
            self._start = now
        self.current_time = now - self._start

    def get_vertices(self) -> List[Vertex]:
        return [
            Vertex(v.position, v.normal, v.color, v.uv) for v in self._vertices
        ]