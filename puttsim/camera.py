"""A chase camera following the ball, and view and projection matrices."""

from __future__ import annotations

import math
from typing import Any, Optional

from puttsim.golfball import GolfBall
from puttsim.math3d import Matrix, Vector3

_UP = Vector3(0.0, 1.0, 0.0)


def _transpose(m: Matrix) -> Matrix:
    return tuple(tuple(row) for row in zip(*m))  # type: ignore[return-value]


def look_at_lh(eye: Vector3, target: Vector3, up: Vector3) -> Matrix:
    """Left-handed view matrix looking from eye towards target."""
    zaxis = (target - eye).normalized()
    xaxis = up.cross(zaxis).normalized()
    yaxis = zaxis.cross(xaxis)
    return (
        (xaxis.x, yaxis.x, zaxis.x, 0.0),
        (xaxis.y, yaxis.y, zaxis.y, 0.0),
        (xaxis.z, yaxis.z, zaxis.z, 0.0),
        (-xaxis.dot(eye), -yaxis.dot(eye), -zaxis.dot(eye), 1.0),
    )


def perspective_fov_lh(fov: float, aspect: float, near: float, far: float) -> Matrix:
    """Left-handed perspective projection with a vertical field of view in radians."""
    h = 1.0 / math.tan(fov / 2.0)
    w = h / aspect
    q = far / (far - near)
    return (
        (w, 0.0, 0.0, 0.0),
        (0.0, h, 0.0, 0.0),
        (0.0, 0.0, q, 1.0),
        (0.0, 0.0, -q * near, 0.0),
    )


def orthographic_lh(width: float, height: float, near: float, far: float) -> Matrix:
    """Left-handed orthographic projection centred on the origin."""
    depth = 1.0 / (far - near)
    return (
        (2.0 / width, 0.0, 0.0, 0.0),
        (0.0, 2.0 / height, 0.0, 0.0),
        (0.0, 0.0, depth, 0.0),
        (0.0, 0.0, -near * depth, 1.0),
    )


class Camera:
    """Follows the first golf ball from behind; mode 0 is 3D, mode 1 is 2D."""

    FOLLOW_DISTANCE = 10.0
    FOLLOW_HEIGHT = 5.0
    FIELD_OF_VIEW = math.radians(45.0)
    NEAR = 1.0
    FAR = 1000.0

    def __init__(self, game: Optional[Any] = None) -> None:
        self.game = game
        self.position = Vector3()
        self.target = Vector3()
        self.direction = 0.0

    def init(self) -> None:
        self.position = Vector3(0.0, 20.0, -50.0)
        self.target = Vector3()
        self.direction = 3.14

    def update(self) -> None:
        balls = self.game.get_objects(GolfBall) if self.game is not None else []
        if not balls:
            return
        ball = balls[0]
        pos = ball.position
        forward = ball.forward
        self.position = Vector3(
            pos.x - forward.x * self.FOLLOW_DISTANCE,
            pos.y + self.FOLLOW_HEIGHT,
            pos.z - forward.z * self.FOLLOW_DISTANCE,
        )
        self.target = pos + forward

    def draw(self) -> Matrix:
        """The 3D view matrix for the current frame."""
        return self.view_matrix(0)

    def uninit(self) -> None:
        """Stop following the game's objects."""
        self.game = None

    def view_matrix(self, mode: int) -> Matrix:
        if mode == 0:
            return look_at_lh(self.position, self.target, _UP)
        if mode == 1:
            return look_at_lh(Vector3(0.0, 0.0, -10.0), Vector3(0.0, 0.0, 1.0), _UP)
        raise ValueError(f"unknown camera mode: {mode}")

    def projection_matrix(self, mode: int, width: float, height: float) -> Matrix:
        if mode == 0:
            return perspective_fov_lh(
                self.FIELD_OF_VIEW, float(width) / float(height), self.NEAR, self.FAR
            )
        if mode == 1:
            return _transpose(
                orthographic_lh(float(width), float(height), self.NEAR, self.FAR)
            )
        raise ValueError(f"unknown camera mode: {mode}")