"""Player control state and the delayed-input sidekick buffers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from retrokit.controls import InputData

_HISTORY_MASK = 0xFFFF
_DELAY_BIT = 15


class ControlMode(enum.IntEnum):
    """Where a player's control inputs come from."""

    NONE = -1
    NORMAL = 0
    SIDEKICK = 1


@dataclass
class Player:
    """Movement and control state of one player."""

    entity_no: int = 0
    x_pos: int = 0
    y_pos: int = 0
    x_velocity: int = 0
    y_velocity: int = 0
    speed: int = 0
    screen_x_pos: int = 0
    screen_y_pos: int = 0
    angle: int = 0
    timer: int = 0
    look_pos: int = 0
    values: list[int] = field(default_factory=lambda: [0] * 8)
    collision_mode: int = 0
    skidding: int = 0
    pushing: int = 0
    collision_plane: int = 0
    control_mode: int = ControlMode.NORMAL
    control_lock: int = 0
    top_speed: int = 0
    acceleration: int = 0
    deceleration: int = 0
    air_acceleration: int = 0
    air_deceleration: int = 0
    gravity_strength: int = 0
    jump_strength: int = 0
    jump_cap: int = 0
    rolling_acceleration: int = 0
    rolling_deceleration: int = 0
    visible: bool = False
    tile_collisions: bool = False
    object_interactions: bool = False
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    jump_press: bool = False
    jump_hold: bool = False
    follow_player1: bool = False
    track_scroll: bool = False
    gravity: int = 0
    water: bool = False
    flailing: list[int] = field(default_factory=lambda: [0] * 3)


_FIELDS = ("up", "down", "left", "right", "jump_press", "jump_hold")


@dataclass
class ControlBuffers:
    """Sixteen frames of control history, used to drive a following sidekick."""

    up: int = 0
    down: int = 0
    left: int = 0
    right: int = 0
    jump_press: int = 0
    jump_hold: int = 0

    def push(self, player: Player) -> None:
        """Record the player's current controls as the newest frame."""
        for name in _FIELDS:
            history = (getattr(self, name) << 1) | int(bool(getattr(player, name)))
            setattr(self, name, history & _HISTORY_MASK)

    def delayed(self) -> dict[str, bool]:
        """The controls recorded sixteen frames ago."""
        return {name: bool(getattr(self, name) >> _DELAY_BIT) for name in _FIELDS}


def _mode(value: int) -> ControlMode:
    try:
        return ControlMode(value)
    except ValueError:
        return ControlMode.NORMAL


def process_player_control(
    player: Player,
    buffers: ControlBuffers,
    key_down: InputData,
    key_press: InputData,
) -> None:
    """Update a player's controls for this frame according to its control mode."""
    mode = _mode(player.control_mode)
    if mode is ControlMode.SIDEKICK:
        for name, value in buffers.delayed().items():
            setattr(player, name, value)
        return
    if mode is ControlMode.NORMAL:
        player.up = key_down.up
        player.down = key_down.down
        if not key_down.left or not key_down.right:
            player.left = key_down.left
            player.right = key_down.right
        else:
            player.left = False
            player.right = False
        player.jump_hold = key_down.c or key_down.b or key_down.a
        player.jump_press = key_press.c or key_press.b or key_press.a
    buffers.push(player)