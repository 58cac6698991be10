"""Wrapping paper and ribbon for rectangular presents."""

from __future__ import annotations

import re
from dataclasses import dataclass

_DIMENSIONS = re.compile(r"\s*([+-]?\d+)\s*\S\s*([+-]?\d+)\s*\S\s*([+-]?\d+)")


@dataclass(frozen=True)
class Present:
    """A box with length, width and height."""

    length: int
    width: int
    height: int

    def paper_required(self) -> int:
        """Surface area plus the area of the smallest side as slack."""
        sides = (
            self.length * self.width,
            self.width * self.height,
            self.height * self.length,
        )
        return 2 * sum(sides) + min(sides)

    def ribbon_required(self) -> int:
        """Smallest face perimeter plus the volume for the bow."""
        perimeters = (
            2 * (self.length + self.width),
            2 * (self.width + self.height),
            2 * (self.height + self.length),
        )
        return min(perimeters) + self.length * self.width * self.height

    @classmethod
    def parse(cls, line: str) -> Present:
        """Parse a line such as ``2x3x4``."""
        match = _DIMENSIONS.match(line)
        if match is None:
            raise ValueError(f"Invalid present dimensions: {line!r}")
        return cls(*(int(group) for group in match.groups()))


def parse_presents(text: str) -> list[Present]:
    """Parse every line holding dimensions; lines that do not are skipped."""
    presents = []
    for line in text.splitlines():
        try:
            presents.append(Present.parse(line))
        except ValueError:
            continue
    return presents


def part_one(text: str) -> int:
    return sum(present.paper_required() for present in parse_presents(text))


def part_two(text: str) -> int:
    return sum(present.ribbon_required() for present in parse_presents(text))