"""Digital button state and per-frame press/hold snapshots."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable


class Button(enum.IntEnum):
    """Logical input buttons; ANY tracks whether any button is held."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    A = 4
    B = 5
    C = 6
    START = 7
    ANY = 8

    @property
    def flag(self) -> int:
        """The bit that selects this button in a check flags mask."""
        return 1 << self.value


_FIELD_NAMES = {
    Button.UP: "up",
    Button.DOWN: "down",
    Button.LEFT: "left",
    Button.RIGHT: "right",
    Button.A: "a",
    Button.B: "b",
    Button.C: "c",
    Button.START: "start",
}

_REAL_BUTTONS = tuple(button for button in Button if button is not Button.ANY)


@dataclass
class InputButton:
    """Press and hold state of one button, with its key and controller mappings."""

    press: bool = False
    hold: bool = False
    key_mapping: int = 0
    cont_mapping: int = 0

    def set_held(self) -> None:
        """Mark the button held; press is true only on the first held frame."""
        self.press = not self.hold
        self.hold = True

    def set_released(self) -> None:
        self.press = False
        self.hold = False

    def down(self) -> bool:
        return self.press or self.hold


@dataclass
class InputData:
    """A snapshot of the eight game buttons."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    a: bool = False
    b: bool = False
    c: bool = False
    start: bool = False


class InputDevice:
    """Tracks every logical button across frames."""

    def __init__(self) -> None:
        self.buttons: dict[Button, InputButton] = {button: InputButton() for button in Button}
        self.touch_down: list[bool] = []
        self.any_press = False

    def __getitem__(self, button: Button) -> InputButton:
        return self.buttons[Button(button)]

    def update(self, held_buttons: Iterable[Button]) -> None:
        """Advance one frame given the set of buttons currently held."""
        held = {Button(button) for button in held_buttons}
        any_button = self.buttons[Button.ANY]
        for button in _REAL_BUTTONS:
            state = self.buttons[button]
            if button in held:
                state.set_held()
                if not any_button.hold:
                    any_button.set_held()
            elif state.hold:
                state.set_released()
        if not held.intersection(_REAL_BUTTONS):
            any_button.set_released()

    def check_key_press(self, data: InputData, flags: int) -> InputData:
        """Copy the press state of the flagged buttons into data."""
        for button in _REAL_BUTTONS:
            if flags & button.flag:
                setattr(data, _FIELD_NAMES[button], self.buttons[button].press)
        if flags & Button.START.flag:
            self.any_press = self.buttons[Button.ANY].press or any(self.touch_down)
        return data

    def check_key_down(self, data: InputData, flags: int) -> InputData:
        """Copy the hold state of the flagged buttons into data."""
        for button in _REAL_BUTTONS:
            if flags & button.flag:
                setattr(data, _FIELD_NAMES[button], self.buttons[button].hold)
        return data