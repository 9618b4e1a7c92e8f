"""Gamepad state and an input hub that keeps current and previous frames."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntFlag

from cardquest.vecmath import Vector2

__all__ = ["Button", "GamepadState", "Input", "SHRT_MAX", "MAX_DEAD_ZONE"]

SHRT_MAX = 32767
MAX_DEAD_ZONE = 32768


class Button(IntFlag):
    """Gamepad button bits."""

    NONE = 0x0000
    DPAD_UP = 0x0001
    DPAD_DOWN = 0x0002
    DPAD_LEFT = 0x0004
    DPAD_RIGHT = 0x0008
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


@dataclass
class GamepadState:
    """One reading of a gamepad: pressed buttons, sticks and triggers."""

    buttons: int = 0
    thumb_lx: int = 0
    thumb_ly: int = 0
    thumb_rx: int = 0
    thumb_ry: int = 0
    left_trigger: int = 0
    right_trigger: int = 0

    def left_stick(self) -> Vector2:
        """Left stick scaled so that full deflection is about 1.0."""
        return Vector2(self.thumb_lx / SHRT_MAX, self.thumb_ly / SHRT_MAX)

    def right_stick(self) -> Vector2:
        """Right stick scaled so that full deflection is about 1.0."""
        return Vector2(self.thumb_rx / SHRT_MAX, self.thumb_ry / SHRT_MAX)


def _clip(value: int, dead_zone: int) -> int:
    return 0 if abs(value) < dead_zone else value


class Input:
    """Keeps the live reading of each pad and the last two frames seen.

    ``set_state`` records what a pad reports now; ``update`` advances a frame,
    so the previous frame's state becomes the "previous" state.
    """

    _shared: Input | None = None

    def __init__(self) -> None:
        self._live: dict[int, GamepadState] = {}
        self._current: dict[int, GamepadState] = {}
        self._previous: dict[int, GamepadState] = {}
        self._dead_zones: dict[int, tuple[int, int]] = {}

    @classmethod
    def instance(cls) -> Input:
        """The input hub shared across the game."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    @staticmethod
    def _check_stick(stick_no: int) -> None:
        if stick_no < 0:
            raise ValueError(f"invalid joystick number: {stick_no}")

    def set_state(self, stick_no: int, state: GamepadState | None) -> None:
        """Record the pad's live reading; None means the pad is disconnected."""
        self._check_stick(stick_no)
        if state is None:
            self._live.pop(stick_no, None)
        else:
            self._live[stick_no] = replace(state)

    def update(self) -> None:
        """Advance one frame."""
        self._previous = self._current
        self._current = {n: replace(s) for n, s in self._live.items()}

    def _with_dead_zone(self, stick_no: int, state: GamepadState) -> GamepadState:
        dead_l, dead_r = self._dead_zones.get(stick_no, (0, 0))
        return replace(
            state,
            thumb_lx=_clip(state.thumb_lx, dead_l),
            thumb_ly=_clip(state.thumb_ly, dead_l),
            thumb_rx=_clip(state.thumb_rx, dead_r),
            thumb_ry=_clip(state.thumb_ry, dead_r),
        )

    def joystick_state(self, stick_no: int) -> GamepadState | None:
        """This frame's state of a pad, or None when it is not connected."""
        state = self._current.get(stick_no)
        return None if state is None else self._with_dead_zone(stick_no, state)

    def previous_joystick_state(self, stick_no: int) -> GamepadState | None:
        """Last frame's state of a pad, or None when it was not connected."""
        state = self._previous.get(stick_no)
        return None if state is None else self._with_dead_zone(stick_no, state)

    def set_dead_zone(self, stick_no: int, dead_zone_l: int, dead_zone_r: int) -> None:
        """Stick readings whose magnitude is below the dead zone read as zero."""
        self._check_stick(stick_no)
        for zone in (dead_zone_l, dead_zone_r):
            if not 0 <= zone <= MAX_DEAD_ZONE:
                raise ValueError(f"dead zone must be between 0 and {MAX_DEAD_ZONE}")
        self._dead_zones[stick_no] = (dead_zone_l, dead_zone_r)

    def number_of_joysticks(self) -> int:
        return len(self._current)

    def is_triggered(self, stick_no: int, button: int) -> bool:
        """True on the frame exactly ``button`` became the pressed set."""
        current = self.joystick_state(stick_no)
        if current is None:
            return False
        previous = self.previous_joystick_state(stick_no)
        previous_buttons = previous.buttons if previous is not None else 0
        return current.buttons == button and previous_buttons != button