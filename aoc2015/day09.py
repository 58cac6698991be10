"""Routes between cities: every trip that visits each city exactly once."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

_ROUTE = re.compile(r"(.+) to (.+) = (\d+)")


@dataclass(frozen=True)
class Route:
    destination: str
    distance: int


@dataclass(frozen=True)
class Trip:
    """A sequence of legs; the first names the start city with distance 0."""

    routes: tuple[Route, ...] = ()

    def distance(self) -> int:
        return sum(route.distance for route in self.routes)

    def __str__(self) -> str:
        legs = ", ".join(f"{r.destination} ({r.distance})" for r in self.routes)
        return f"{legs}, Total = {self.distance()}"


@dataclass
class Cities:
    """Cities and the routes leaving each, in the order they were read."""

    cities: dict[str, list[Route]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.cities)

    def insert(self, line: str) -> None:
        """Add the two-way route in a line such as ``A to B = 12``."""
        match = _ROUTE.search(line)
        if match is None:
            return
        origin, destination, distance = match.group(1), match.group(2), int(match.group(3))
        self.cities.setdefault(origin, []).append(Route(destination, distance))
        self.cities.setdefault(destination, []).append(Route(origin, distance))

    def _visit(self, city: str, visited: frozenset[str], trip: Trip) -> Iterator[Trip]:
        visited = visited | {city}
        for route in self.cities[city]:
            if route.destination in visited:
                continue
            new_trip = Trip(trip.routes + (route,))
            yield from self._visit(route.destination, visited, new_trip)
            if len(visited) + 1 == len(self.cities):
                yield new_trip

    def find_trips(self) -> list[Trip]:
        """Every trip visiting all cities once, from each start city in name order."""
        trips: list[Trip] = []
        for name in sorted(self.cities):
            trips.extend(self._visit(name, frozenset(), Trip((Route(name, 0),))))
        return trips

    def __str__(self) -> str:
        lines = []
        for name in sorted(self.cities):
            lines.append(f"{name}:")
            lines.extend(
                f"    {r.destination} - {r.distance}" for r in self.cities[name]
            )
        return "\n".join(lines)


def _parse(text: str) -> Cities:
    cities = Cities()
    for line in text.splitlines():
        cities.insert(line)
    return cities


def part_one(text: str) -> int:
    """Distance of the shortest trip."""
    return min(trip.distance() for trip in _parse(text).find_trips())


def part_two(text: str) -> int:
    """Distance of the longest trip."""
    return max(trip.distance() for trip in _parse(text).find_trips())