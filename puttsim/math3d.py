"""Small 3D vector and 4x4 matrix helpers (row-vector, left-handed convention)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

Matrix = Tuple[
    Tuple[float, float, float, float],
    Tuple[float, float, float, float],
    Tuple[float, float, float, float],
    Tuple[float, float, float, float],
]


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vector3()
        return self / length


def identity_matrix() -> Matrix:
    return tuple(
        tuple(1.0 if row == col else 0.0 for col in range(4)) for row in range(4)
    )  # type: ignore[return-value]


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """Matrix product a * b."""
    columns = list(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, col)) for col in columns) for row in a
    )  # type: ignore[return-value]


def scale_matrix(x: float, y: float, z: float) -> Matrix:
    return (
        (x, 0.0, 0.0, 0.0),
        (0.0, y, 0.0, 0.0),
        (0.0, 0.0, z, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def translation_matrix(x: float, y: float, z: float) -> Matrix:
    return (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (x, y, z, 1.0),
    )


def _rotation_x(angle: float) -> Matrix:
    c, s = math.cos(angle), math.sin(angle)
    return (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, c, s, 0.0),
        (0.0, -s, c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def _rotation_y(angle: float) -> Matrix:
    c, s = math.cos(angle), math.sin(angle)
    return (
        (c, 0.0, -s, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (s, 0.0, c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def _rotation_z(angle: float) -> Matrix:
    c, s = math.cos(angle), math.sin(angle)
    return (
        (c, s, 0.0, 0.0),
        (-s, c, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def rotation_yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> Matrix:
    """Rotation applying roll (Z), then pitch (X), then yaw (Y)."""
    return multiply(multiply(_rotation_z(roll), _rotation_x(pitch)), _rotation_y(yaw))


def srt_matrix(scale: Vector3, rotation: Vector3, position: Vector3) -> Matrix:
    """World matrix scale * rotation * translation; rotation holds pitch, yaw, roll in x, y, z."""
    s = scale_matrix(scale.x, scale.y, scale.z)
    r = rotation_yaw_pitch_roll(rotation.y, rotation.x, rotation.z)
    t = translation_matrix(position.x, position.y, position.z)
    return multiply(multiply(s, r), t)


def transform(v: Vector3, m: Matrix) -> Vector3:
    """Transform a point by a matrix, dividing by w where needed."""
    row = (v.x, v.y, v.z, 1.0)
    x, y, z, w = (sum(row[i] * m[i][col] for i in range(4)) for col in range(4))
    if w not in (0.0, 1.0):
        return Vector3(x / w, y / w, z / w)
    return Vector3(x, y, z)