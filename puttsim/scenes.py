"""The title, stage and result screens."""

from __future__ import annotations

import enum
from typing import Any, List

from puttsim.arrow import Arrow, ArrowState
from puttsim.gameobject import GameObject, Scene
from puttsim.golfball import BallState, GolfBall
from puttsim.ground import Ground
from puttsim.input import Key
from puttsim.pole import Pole
from puttsim.sprite import Sprite


class SceneName(enum.IntEnum):
    TITLE = 0
    STAGE1 = 1
    RESULT = 2


class _Phase(enum.IntEnum):
    BALL_MOVING = 0
    CHOOSING_DIRECTION = 1
    CHOOSING_POWER = 2


class _SpriteScene(Scene):
    """A scene that owns a list of objects it removes from the game on close."""

    def __init__(self, game: Any) -> None:
        self.game = game
        self.objects: List[GameObject] = []

    def _add_sprite(
        self,
        texture: str,
        position: tuple,
        scale: tuple,
        uv: tuple = (),
    ) -> Sprite:
        sprite = self.game.add_object(Sprite)
        sprite.set_texture(texture)
        sprite.set_position(*position)
        sprite.set_scale(*scale)
        if uv:
            sprite.set_uv(*uv)
        self.objects.append(sprite)
        return sprite

    def close(self) -> None:
        """Remove this scene's objects from the game."""
        for obj in self.objects:
            self.game.delete_object(obj)


class TitleScene(_SpriteScene):
    """Shows the title background; Enter starts the stage."""

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        background = self.game.add_object(Sprite)
        background.set_texture("assets/texture/background1.png")
        background.set_position(0.0, 0.0, 0.0)
        background.set_rotation(0.0, 0.0, 0.0)
        background.set_scale(1280.0, 720.0, 0.0)
        self.objects.append(background)

    def update(self) -> None:
        if self.game.input.key_trigger(Key.RETURN):
            self.game.change_scene(SceneName.STAGE1)

    def close(self) -> None:
        super().close()


class Stage1Scene(_SpriteScene):
    """One hole: aim with the arrow, set power, shoot, and count strokes."""

    PAR = 4
    SHOT_FACTOR = 0.25

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self.state = _Phase.BALL_MOVING
        self.par = self.PAR
        self.stroke_count = 0

        for cls in (GolfBall, Ground, Arrow, Pole, Ground):
            self.objects.append(self.game.add_object(cls))

        self._add_sprite("assets/texture/ui_back.png", (-475.0, -300.0, 0.0), (270.0, 75.0, 0.0))
        self._add_sprite(
            "assets/texture/ui_string.png", (-575.0, -245.0, 0.0), (60.0, 45.0, 0.0), (1, 1, 2, 1)
        )
        self._add_sprite(
            "assets/texture/ui_string.png", (-400.0, -305.0, 0.0), (105.0, 63.0, 0.0), (2, 1, 2, 1)
        )
        self._add_sprite(
            "assets/texture/ui_number.png",
            (-510.0, -245.0, 0.0),
            (65.0, 45.0, 0.0),
            (self.par + 1, 1, 10, 1),
        )
        self._add_sprite(
            "assets/texture/ui_number.png", (-485.0, -300.0, 0.0), (95.0, 72.0, 0.0), (2, 1, 10, 1)
        )
        self._add_sprite(
            "assets/texture/ui_number.png", (-556.0, -300.0, 0.0), (95.0, 72.0, 0.0), (1, 1, 10, 1)
        )

        self.ball.state = BallState.PHYSICS
        self.arrow.set_state(ArrowState.HIDDEN)
        self.pole.set_position(0.0, 0.0, -3.0)

    @property
    def ball(self) -> GolfBall:
        return self.objects[0]  # type: ignore[return-value]

    @property
    def arrow(self) -> Arrow:
        return self.objects[2]  # type: ignore[return-value]

    @property
    def pole(self) -> Pole:
        return self.objects[3]  # type: ignore[return-value]

    def update(self) -> None:
        ball = self.ball
        arrow = self.arrow
        keys = self.game.input

        if self.state == _Phase.BALL_MOVING:
            if ball.state == BallState.STOPPED:
                self.state = _Phase.CHOOSING_DIRECTION
                arrow.set_state(self.state)
                self.stroke_count += 1

            counters = (self.objects[8], self.objects[9])
            for place, counter in enumerate(counters):
                digit = self.stroke_count % 10 ** (place + 1) // 10**place
                counter.set_uv(digit + 1, 1, 10, 1)

            if ball.state == BallState.CUP_IN:
                self.game.change_scene(SceneName.RESULT)
        elif self.state == _Phase.CHOOSING_DIRECTION:
            if keys.key_trigger(Key.SPACE):
                self.state = _Phase.CHOOSING_POWER
                arrow.set_state(self.state)
        elif self.state == _Phase.CHOOSING_POWER:
            if keys.key_trigger(Key.SPACE):
                self.state = _Phase.BALL_MOVING
                ball.state = BallState.PHYSICS
                arrow.set_state(self.state)
                ball.shot(arrow.get_vector() * self.SHOT_FACTOR)

    def close(self) -> None:
        super().close()

    def score(self) -> int:
        """Strokes relative to par."""
        return self.stroke_count - self.par


class ResultScene(_SpriteScene):
    """Shows the score against par; Enter returns to the title."""

    ROWS = 13

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self._add_sprite("assets/texture/background2.png", (0.0, 0.0, 0.0), (1280.0, 720.0, 0.0))
        self._add_sprite(
            "assets/texture/resultString.png",
            (300.0, 0.0, 0.0),
            (700.0, 100.0, 0.0),
            (1, 1, 1, self.ROWS),
        )
        self._add_sprite("assets/texture/ui_back.png", (-300.0, 0.0, 0.0), (361.0, 400.0, 0.0))

    def update(self) -> None:
        if self.game.input.key_trigger(Key.RETURN):
            self.game.change_scene(SceneName.TITLE)

    def close(self) -> None:
        super().close()

    def set_score(self, score: int) -> None:
        """Pick the result text row for a score from -4 to 6; others use the last row."""
        text = self.objects[1]
        row = score + 6 if -4 <= score <= 6 else self.ROWS
        text.set_uv(1, row, 1, self.ROWS)