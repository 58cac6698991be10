"""Houses visited by Santa (and Robo-Santa) delivering presents."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

_DIRECTIONS = {
    "^": (0, 1),
    ">": (1, 0),
    "v": (0, -1),
    "<": (-1, 0),
}


@dataclass
class Santa:
    """A deliverer who drops a present at each house moved to."""

    locations: Counter = field(default_factory=Counter)
    position: tuple[int, int] = (0, 0)

    def move(self, direction: str) -> None:
        """Move one house in ``direction`` and leave a present there."""
        try:
            dx, dy = _DIRECTIONS[direction]
        except KeyError:
            raise ValueError(f"Invalid direction: {direction!r}") from None
        x, y = self.position
        self.position = (x + dx, y + dy)
        self.locations[self.position] += 1


def part_one(text: str) -> int:
    """Number of houses receiving at least one present."""
    locations = Counter({(0, 0): 1})
    santa = Santa(locations)
    for direction in text.strip():
        santa.move(direction)
    return len(locations)


def part_two(text: str) -> int:
    """Houses visited when Santa and Robo-Santa take alternate instructions."""
    locations = Counter({(0, 0): 1})
    deliverers = (Santa(locations), Santa(locations))
    for index, direction in enumerate(text.strip()):
        deliverers[index % 2].move(direction)
    return len(locations)