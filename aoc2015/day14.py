"""Reindeer races: flying in bursts and resting in between."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

_REINDEER = re.compile(
    r"([A-Z]\w+) can fly (\d+) km/s for (\d+) seconds, "
    r"but then must rest for (\d+) seconds."
)


@dataclass
class Reindeer:
    name: str
    speed: int
    fly_time: int
    rest_time: int
    points: int = 0
    distance: int = 0
    _clock: int = field(default=0, init=False, repr=False)

    @classmethod
    def parse(cls, line: str) -> Reindeer:
        match = _REINDEER.search(line)
        if match is None:
            raise ValueError(f"Invalid reindeer description: {line!r}")
        name, speed, fly, rest = match.groups()
        return cls(name, int(speed), int(fly), int(rest))

    def tick(self) -> None:
        """Advance the race by one second."""
        self._clock += 1
        if self._clock <= self.fly_time:
            self.distance += self.speed
        if self._clock >= self.fly_time + self.rest_time:
            self._clock = 0


def parse_reindeer(text: str) -> list[Reindeer]:
    return [Reindeer.parse(line) for line in text.splitlines() if line.strip()]


def race_distance(reindeer: Sequence[Reindeer], seconds: int) -> Reindeer:
    """Race the given reindeer for ``seconds`` and return the one furthest ahead."""
    for _ in range(seconds):
        for r in reindeer:
            r.tick()
    return max(reindeer, key=lambda r: r.distance)


def race_points(reindeer: Sequence[Reindeer], seconds: int) -> Reindeer:
    """Race scoring a point per second for each leader; return the top scorer."""
    for _ in range(seconds):
        for r in reindeer:
            r.tick()
        lead = max(r.distance for r in reindeer)
        for r in reindeer:
            if r.distance == lead:
                r.points += 1
    return max(reindeer, key=lambda r: r.points)