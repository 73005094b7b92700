"""Keyboard and game-controller state tracked frame by frame."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Tuple

_STICK_RANGE = 32767.0
_TRIGGER_RANGE = 255.0
_MOTOR_MAX = 65535.0


class Key(enum.IntEnum):
    """Virtual key codes used by the game."""

    RETURN = 0x0D
    SHIFT = 0x10
    ESCAPE = 0x1B
    SPACE = 0x20
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28
    DIGIT_0 = 0x30
    DIGIT_1 = 0x31
    DIGIT_2 = 0x32
    DIGIT_3 = 0x33
    DIGIT_4 = 0x34
    DIGIT_5 = 0x35
    DIGIT_6 = 0x36
    DIGIT_7 = 0x37
    DIGIT_8 = 0x38
    DIGIT_9 = 0x39
    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49  # noqa: E741
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F  # noqa: E741
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x45  # shares its code with E
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A


class Button(enum.IntFlag):
    """Controller button bits."""

    UP = 0x0001
    DOWN = 0x0002
    LEFT = 0x0004
    RIGHT = 0x0008
    START = 0x0010
    BACK = 0x0020
    LEFT_THUMB = 0x0040
    RIGHT_THUMB = 0x0080
    LEFT_SHOULDER = 0x0100
    RIGHT_SHOULDER = 0x0200
    A = 0x1000
    B = 0x2000
    X = 0x4000
    Y = 0x8000


@dataclass(frozen=True)
class ControllerState:
    """One snapshot of a game controller."""

    buttons: int = 0
    left_trigger: int = 0
    right_trigger: int = 0
    thumb_lx: int = 0
    thumb_ly: int = 0
    thumb_rx: int = 0
    thumb_ry: int = 0


@dataclass
class InputState:
    """Current and previous frame of keyboard and controller input, plus rumble timing."""

    keys: FrozenSet[int] = frozenset()
    previous_keys: FrozenSet[int] = frozenset()
    controller: ControllerState = field(default_factory=ControllerState)
    previous_controller: ControllerState = field(default_factory=ControllerState)
    vibration_time: int = 0
    vibration: Tuple[int, int] = (0, 0)

    def update(
        self,
        pressed_keys: Iterable[int] = (),
        controller: Optional[ControllerState] = None,
    ) -> None:
        """Advance one frame with the keys held down and the controller snapshot."""
        self.previous_keys = self.keys
        self.previous_controller = self.controller
        self.keys = frozenset(int(k) for k in pressed_keys)
        self.controller = controller if controller is not None else ControllerState()

        if self.vibration_time > 0:
            self.vibration_time -= 1
            if self.vibration_time == 0:
                self.vibration = (0, 0)

    def key_press(self, key: int) -> bool:
        return int(key) in self.keys

    def key_trigger(self, key: int) -> bool:
        return int(key) in self.keys and int(key) not in self.previous_keys

    def key_release(self, key: int) -> bool:
        return int(key) not in self.keys and int(key) in self.previous_keys

    def left_stick(self) -> Tuple[float, float]:
        return (
            self.controller.thumb_lx / _STICK_RANGE,
            self.controller.thumb_ly / _STICK_RANGE,
        )

    def right_stick(self) -> Tuple[float, float]:
        return (
            self.controller.thumb_rx / _STICK_RANGE,
            self.controller.thumb_ry / _STICK_RANGE,
        )

    def left_trigger(self) -> float:
        return self.controller.left_trigger / _TRIGGER_RANGE

    def right_trigger(self) -> float:
        return self.controller.right_trigger / _TRIGGER_RANGE

    def button_press(self, button: int) -> bool:
        return (self.controller.buttons & button) != 0

    def button_trigger(self, button: int) -> bool:
        return (self.controller.buttons & button) != 0 and (
            self.previous_controller.buttons & button
        ) == 0

    def button_release(self, button: int) -> bool:
        return (self.controller.buttons & button) == 0 and (
            self.previous_controller.buttons & button
        ) != 0

    def set_vibration(self, frames: int = 1, power: float = 1.0) -> None:
        """Run both motors at power (0 to 1) for the given number of frames."""
        speed = int(power * _MOTOR_MAX)
        self.vibration = (speed, speed)
        self.vibration_time = frames