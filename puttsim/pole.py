"""The flag pole, which settles onto the terrain where it is placed."""

from __future__ import annotations

from typing import Optional, Union

from puttsim.collision import Line, Polygon, line_polygon_contact
from puttsim.gameobject import GameObject
from puttsim.ground import Ground
from puttsim.math3d import Vector3

_UP = Vector3(0.0, 1.0, 0.0)


class Pole(GameObject):
    """The hole's pole."""

    def init(self) -> None:
        self.scale = Vector3(3.0, 3.0, 3.0)

    def update(self) -> None:
        """The pole does not move on its own."""

    def set_position(
        self,
        x: Union[float, Vector3],
        y: Optional[float] = None,
        z: Optional[float] = None,
    ) -> None:
        """Place the pole, then drop or lift it onto the terrain below or above it."""
        if isinstance(x, Vector3):
            self.position = x
        else:
            self.position = Vector3(float(x), float(y), float(z))

        grounds = self.game.get_objects(Ground) if self.game is not None else []
        vertices = [v for ground in grounds for v in ground.get_vertices()]
        for i in range(0, len(vertices) - 2, 3):
            polygon = Polygon(
                vertices[i].position, vertices[i + 1].position, vertices[i + 2].position
            )
            contact = line_polygon_contact(Line(self.position, _UP), polygon)
            if contact is not None:
                self.position = Vector3(self.position.x, contact.y, self.position.z)