"""A textured quad drawn in screen space, with sprite-sheet UV selection."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple, Union

from puttsim.gameobject import GameObject
from puttsim.math3d import (
    Matrix,
    Vector3,
    multiply,
    rotation_yaw_pitch_roll,
    scale_matrix,
    translation_matrix,
)

_DEG_TO_RAD = 3.14 / 180

Number = Union[float, Vector3]


def _as_vector(x: Number, y: Optional[float], z: Optional[float]) -> Vector3:
    if isinstance(x, Vector3):
        return x
    return Vector3(float(x), float(y), float(z))


class Sprite(GameObject):
    """A 2D image; set_uv picks cell (nu, nv) of a sheet split sx by sy."""

    def __init__(self, game: Optional[Any] = None, camera: Optional[Any] = None) -> None:
        super().__init__(game, camera)
        self.texture: Optional[str] = None
        self.vertices: List[Vector3] = []
        self.num_u = 1.0
        self.num_v = 1.0
        self.split_x = 1.0
        self.split_y = 1.0

    def init(self) -> None:
        self.vertices = [
            Vector3(-0.5, 0.5, 0.0),
            Vector3(0.5, 0.5, 0.0),
            Vector3(-0.5, -0.5, 0.0),
            Vector3(0.5, -0.5, 0.0),
        ]

    def update(self) -> None:
        """Sprites are static."""

    def set_texture(self, name: str) -> None:
        if not name:
            raise ValueError("texture name must not be empty")
        self.texture = name

    def set_position(
        self, x: Number, y: Optional[float] = None, z: Optional[float] = None
    ) -> None:
        self.position = _as_vector(x, y, z)

    def set_rotation(
        self, x: Number, y: Optional[float] = None, z: Optional[float] = None
    ) -> None:
        """Set the rotation in degrees."""
        self.rotation = _as_vector(x, y, z) * _DEG_TO_RAD

    def set_scale(
        self, x: Number, y: Optional[float] = None, z: Optional[float] = None
    ) -> None:
        self.scale = _as_vector(x, y, z)

    def set_uv(self, nu: float, nv: float, sx: float, sy: float) -> None:
        self.num_u = float(nu)
        self.num_v = float(nv)
        self.split_x = float(sx)
        self.split_y = float(sy)

    def uv_rect(self) -> Tuple[float, float, float, float]:
        """UV offset and size: (u, v, width, height)."""
        return (
            self.num_u - 1,
            self.num_v - 1,
            1 / self.split_x,
            1 / self.split_y,
        )

    def world_matrix(self) -> Matrix:
        s = scale_matrix(self.scale.x, self.scale.y, self.scale.z)
        r = rotation_yaw_pitch_roll(self.rotation.x, self.rotation.y, self.rotation.z)
        t = translation_matrix(self.position.x, self.position.y, self.position.z)
        return multiply(multiply(s, r), t)