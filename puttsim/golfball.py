"""The golf ball: keyboard-driven movement, gravity and bouncing off the terrain."""

from __future__ import annotations

import enum
import math
from typing import Any, List, Optional

from puttsim.collision import (
    Polygon,
    Segment,
    Sphere,
    dot,
    move_sphere_along_segment,
    move_sphere_out,
    polygon_normal,
    segment_polygon_contact,
    sphere_polygon_contact,
    sphere_sphere_contact,
)
from puttsim.gameobject import GameObject
from puttsim.ground import Ground, Vertex
from puttsim.input import InputState, Key
from puttsim.math3d import Vector3, srt_matrix
from puttsim.pole import Pole

_UP = Vector3(0.0, 1.0, 0.0)
_NO_HIT = 9999.0


class BallState(enum.IntEnum):
    PHYSICS = 0
    STOPPED = 1
    CUP_IN = 2


class GolfBall(GameObject):
    """A ball that rolls under player control and settles on the ground."""

    GRAVITY = 0.05
    BASIC_SPEED = 1.0
    BASIC_MAX_SPEED = 1.0
    DECELERATION = 0.2
    RADIUS = 0.5
    RESTITUTION = 0.55
    POLE_RADIUS = 0.5
    TURN_STEP = 0.03
    STOP_FRAMES = 10
    RESPAWN = Vector3(0.0, 50.0, 0.0)

    def __init__(
        self,
        game: Optional[Any] = None,
        camera: Optional[Any] = None,
        input_state: Optional[InputState] = None,
    ) -> None:
        super().__init__(game, camera)
        self._input = input_state
        self.velocity = Vector3()
        self.speed = self.BASIC_SPEED
        self.max_speed = self.BASIC_MAX_SPEED
        self.state = BallState.PHYSICS
        self.stop_count = 0
        self.forward = Vector3()

    @property
    def input(self) -> InputState:
        """The input the ball reads: its own, else the game's."""
        if self._input is None:
            game_input = getattr(self.game, "input", None)
            if game_input is not None:
                return game_input
            self._input = InputState()
        return self._input

    def init(self) -> None:
        self.scale = Vector3(0.5, 0.5, 0.5)
        self.position = Vector3(self.position.x, 1.0, self.position.z)

    def shot(self, v: Vector3) -> None:
        self.velocity = v

    def _ground_vertices(self) -> List[Vertex]:
        if self.game is None:
            return []
        return [v for g in self.game.get_objects(Ground) for v in g.get_vertices()]

    def update(self) -> None:
        self.move()

        if self.state != BallState.PHYSICS:
            return
        old_pos = self.position

        if self.stop_count > self.STOP_FRAMES:
            self.velocity = Vector3()
            self.state = BallState.STOPPED

        vertices = self._ground_vertices()
        polygons = [
            Polygon(vertices[i].position, vertices[i + 1].position, vertices[i + 2].position)
            for i in range(0, len(vertices) - 2, 3)
        ]

        move_distance = _NO_HIT
        normal = Vector3()

        segment_hit = False
        for polygon in polygons:
            segment = Segment(old_pos, self.position)
            contact = segment_polygon_contact(segment, polygon)
            if contact is None:
                continue
            new_pos, distance = move_sphere_along_segment(
                segment, self.RADIUS, polygon, contact
            )
            if move_distance > distance:
                move_distance = distance
                self.position = new_pos
                normal = polygon_normal(polygon)
            segment_hit = True

        if not segment_hit:
            for polygon in polygons:
                sphere = Sphere(self.position, self.RADIUS)
                contact = sphere_polygon_contact(sphere, polygon)
                if contact is None:
                    continue
                new_pos = move_sphere_out(sphere, polygon, contact)
                distance = (new_pos - old_pos).length()
                if move_distance > distance:
                    move_distance = distance
                    self.position = new_pos
                    normal = polygon_normal(polygon)

        if move_distance != _NO_HIT:
            self.velocity = Vector3(self.velocity.x, -self.GRAVITY, self.velocity.z)
            along_normal = dot(self.velocity, normal) * normal
            tangent = self.velocity - along_normal
            self.velocity = tangent - self.RESTITUTION * along_normal

        if self.position.y < -100:
            self.position = self.RESPAWN
            self.velocity = Vector3()

        poles = self.game.get_objects(Pole) if self.game is not None else []
        if poles:
            ball_sphere = Sphere(self.position, self.RADIUS)
            pole_sphere = Sphere(poles[0].position, self.POLE_RADIUS)
            if sphere_sphere_contact(ball_sphere, pole_sphere) is not None:
                self.state = BallState.CUP_IN

    def move(self) -> None:
        """Steer and push the ball from the keyboard, then apply gravity."""
        world = srt_matrix(self.scale, self.rotation, self.position)
        self.forward = Vector3(world[2][0], world[2][1], world[2][2]).normalized()
        right = self.forward.cross(_UP).normalized()
        keys = self.input

        if keys.key_press(Key.LEFT):
            self.rotation = Vector3(
                self.rotation.x, self.rotation.y - self.TURN_STEP, self.rotation.z
            )
        if keys.key_press(Key.RIGHT):
            self.rotation = Vector3(
                self.rotation.x, self.rotation.y + self.TURN_STEP, self.rotation.z
            )

        if keys.key_press(Key.SHIFT):
            self.speed = self.BASIC_SPEED * 1.3
            self.max_speed = self.BASIC_MAX_SPEED * 2
        else:
            self.speed = self.BASIC_SPEED
            self.max_speed = self.BASIC_MAX_SPEED

        pushed = False
        for key, direction in (
            (Key.A, right),
            (Key.D, -right),
            (Key.W, self.forward),
            (Key.S, -self.forward),
        ):
            if keys.key_press(key):
                self.velocity = self.velocity + direction * self.speed
                pushed = True

        current = self.velocity.length()
        if current > self.max_speed:
            self.velocity = self.velocity * (self.max_speed / current)

        if not pushed:
            self.velocity = self.velocity * math.exp(-self.DECELERATION)

        self.velocity = Vector3(
            self.velocity.x, self.velocity.y - self.GRAVITY, self.velocity.z
        )
        self.position = self.position + self.velocity