"""A 1000x1000 grid of lights driven by on/off/toggle instructions."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

GRID_SIZE = 1000

_COORDINATES = re.compile(
    r"(-?\d+)\s*,\s*(-?\d+)\s+\S+\s+(-?\d+)\s*,\s*(-?\d+)"
)
_TOGGLE = bytes([1, 0]) + bytes(254)


class Action(Enum):
    TOGGLE = "toggle"
    TURN_ON = "turn on"
    TURN_OFF = "turn off"


@dataclass(frozen=True)
class Command:
    """An action over the inclusive rectangle from ``start`` to ``end``."""

    action: Action
    start: tuple[int, int]
    end: tuple[int, int]

    @classmethod
    def parse(cls, line: str) -> Command:
        """Parse e.g. ``turn on 0,0 through 999,999``."""
        words = line.split()
        if not words:
            raise ValueError("Empty command")
        if words[0] == "turn":
            on = len(words) > 1 and words[1] == "on"
            action = Action.TURN_ON if on else Action.TURN_OFF
        else:
            action = Action.TOGGLE
        match = _COORDINATES.search(line)
        if match is None:
            raise ValueError(f"Invalid command: {line!r}")
        x1, y1, x2, y2 = (int(group) for group in match.groups())
        return cls(action, (x1, y1), (x2, y2))


def parse_commands(text: str) -> list[Command]:
    return [Command.parse(line) for line in text.splitlines() if line.strip()]


def part_one(commands: Iterable[Command]) -> int:
    """Number of lights lit after applying the commands."""
    grid = [bytearray(GRID_SIZE) for _ in range(GRID_SIZE)]
    for command in commands:
        (x1, y1), (x2, y2) = command.start, command.end
        width = max(y2 - y1 + 1, 0)
        for row in grid[x1 : x2 + 1]:
            if command.action is Action.TURN_ON:
                row[y1 : y2 + 1] = b"\x01" * width
            elif command.action is Action.TURN_OFF:
                row[y1 : y2 + 1] = bytes(width)
            else:
                row[y1 : y2 + 1] = row[y1 : y2 + 1].translate(_TOGGLE)
    return sum(row.count(1) for row in grid)


def part_two(commands: Iterable[Command]) -> int:
    """Total brightness after applying the commands as brightness changes."""
    grid = [[0] * GRID_SIZE for _ in range(GRID_SIZE)]
    for command in commands:
        (x1, y1), (x2, y2) = command.start, command.end
        for row in grid[x1 : x2 + 1]:
            cells = row[y1 : y2 + 1]
            if command.action is Action.TURN_ON:
                row[y1 : y2 + 1] = [value + 1 for value in cells]
            elif command.action is Action.TURN_OFF:
                row[y1 : y2 + 1] = [max(value - 1, 0) for value in cells]
            else:
                row[y1 : y2 + 1] = [value + 2 for value in cells]
    return sum(sum(row) for row in grid)