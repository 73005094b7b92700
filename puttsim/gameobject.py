"""Base classes for things in the world and for scenes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from puttsim.math3d import Matrix, Vector3, srt_matrix


class GameObject(ABC):
    """Something with a position, rotation and scale that is updated each frame."""

    def __init__(self, game: Optional[Any] = None, camera: Optional[Any] = None) -> None:
        self.game = game
        self.camera = camera
        self.position = Vector3()
        self.rotation = Vector3()
        self.scale = Vector3(1.0, 1.0, 1.0)

    def init(self) -> None:
        """Prepare the object once it has been added to the game."""

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""

    def draw(self) -> Matrix:
        """World matrix the object is drawn with."""
        return self.world_matrix()

    def uninit(self) -> None:
        """Detach the object from its game and camera before it is removed."""
        self.game = None
        self.camera = None

    def set_position(self, pos: Vector3) -> None:
        self.position = Vector3(pos.x, pos.y, pos.z)

    def world_matrix(self) -> Matrix:
        return srt_matrix(self.scale, self.rotation, self.position)


class Scene(ABC):
    """One screen of the game, driven once per frame."""

    @abstractmethod
    def update(self) -> None:
        """Advance the scene by one frame."""