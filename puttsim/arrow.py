"""The aiming arrow that picks shot direction and power."""

from __future__ import annotations

import enum
from typing import Optional

from puttsim.gameobject import GameObject
from puttsim.golfball import GolfBall
from puttsim.math3d import Matrix, Vector3, rotation_yaw_pitch_roll, transform


class ArrowState(enum.IntEnum):
    HIDDEN = 0
    DIRECTION = 1
    POWER = 2


class Arrow(GameObject):
    """Spins while choosing direction and stretches while choosing power."""

    SPIN_STEP = 0.03
    SPIN_LIMIT = 6.28
    GROW_STEP = 0.04
    DIRECTION_LENGTH = 3.0
    MAX_LENGTH = 4.0
    MIN_LENGTH = 1.0

    def __init__(self, game=None, camera=None) -> None:
        super().__init__(game, camera)
        self.state = ArrowState.HIDDEN

    def init(self) -> None:
        self.scale = Vector3(3.0, 3.0, 3.0)
        self.state = ArrowState.DIRECTION

    def update(self) -> None:
        if self.state == ArrowState.HIDDEN:
            return

        balls = self.game.get_objects(GolfBall) if self.game is not None else []
        if balls:
            self.position = balls[0].position

        if self.state == ArrowState.DIRECTION:
            yaw = self.rotation.y + self.SPIN_STEP
            if yaw > self.SPIN_LIMIT:
                yaw = 0.0
            self.scale = Vector3(self.scale.x, self.scale.y, self.DIRECTION_LENGTH)
            self.rotation = Vector3(self.rotation.x, yaw, self.rotation.z)
        elif self.state == ArrowState.POWER:
            length = self.scale.z + self.GROW_STEP
            if length > self.MAX_LENGTH:
                length = self.MIN_LENGTH
            self.scale = Vector3(self.scale.x, self.scale.y, length)

    def draw(self) -> Optional[Matrix]:
        """World matrix, or None while hidden."""
        if self.state == ArrowState.HIDDEN:
            return None
        return self.world_matrix()

    def set_state(self, state: int) -> None:
        self.state = ArrowState(state)

    def get_vector(self) -> Vector3:
        """Shot vector: the arrow's direction scaled by its length."""
        rotation = rotation_yaw_pitch_roll(self.rotation.y, self.rotation.x, self.rotation.z)
        return transform(Vector3(0.0, 0.0, -1.0), rotation) * self.scale.z