"""Direction and control command tokens typed by the player."""
from __future__ import annotations

from enum import Enum


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

CARDINAL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


class ControlCommand(Enum):
    EXIT = "exit"
    SAVE = "save"
    LOAD = "load"


Command = Direction | ControlCommand

_COMMANDS: dict[str, Command] = {
    **{direction.value: direction for direction in Direction},
    **{control.value: control for control in ControlCommand},
}

COMMAND_PROMPT = "Please enter the command\n(up / down / left / right / save / load / exit)"


def parse_command(token: str) -> Command | None:
    """Return the command for an exact, case-sensitive token, or None."""
    return _COMMANDS.get(token)
