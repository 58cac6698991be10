"""Seating guests around a round table for the greatest happiness."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import permutations

_SENTIMENT = re.compile(
    r"([A-Z]\w+) would (gain|lose) (\d+) happiness units by sitting next to ([A-Z]\w+)"
)


@dataclass
class Person:
    """A guest and how they feel about sitting next to each other guest."""

    name: str = ""
    sentiments: dict[str, int] = field(default_factory=dict)

    def __str__(self) -> str:
        lines = [f"{self.name}:"]
        lines.extend(f"{name} : {value}" for name, value in sorted(self.sentiments.items()))
        return "\n".join(lines)


@dataclass
class Party:
    attendees: dict[str, Person] = field(default_factory=dict)

    def add_attendee(self, name: str) -> None:
        """Add a guest who feels nothing about anyone, and vice versa."""
        sentiments = {}
        for other_name, person in self.attendees.items():
            sentiments[other_name] = 0
            person.sentiments[name] = 0
        person = self.attendees.setdefault(name, Person(name))
        person.name = name
        person.sentiments = sentiments

    def parse_attendee(self, line: str) -> None:
        """Record the sentiment in a line; lines that do not match are ignored."""
        match = _SENTIMENT.search(line)
        if match is None:
            return
        name, direction, amount, neighbour = match.groups()
        person = self.attendees.setdefault(name, Person(name))
        value = int(amount)
        person.sentiments[neighbour] = value if direction == "gain" else -value


def seating_happiness(people: Sequence[Person]) -> int:
    """Total happiness of a circular seating in the given order."""
    people = list(people)
    if not people:
        return 0
    neighbours = people[1:] + people[:1]
    return sum(
        a.sentiments[b.name] + b.sentiments[a.name] for a, b in zip(people, neighbours)
    )


def best_happiness(party: Party) -> int:
    """Greatest happiness over every seating; never less than zero."""
    people = [party.attendees[name] for name in sorted(party.attendees)]
    if not people:
        return 0
    first, rest = people[0], people[1:]
    # Rotations of a round table are equivalent, so the first seat is fixed.
    best = max(seating_happiness([first, *order]) for order in permutations(rest))
    return max(best, 0)


def _parse(text: str) -> Party:
    party = Party()
    for line in text.splitlines():
        party.parse_attendee(line)
    return party


def part_one(text: str) -> int:
    return best_happiness(_parse(text))


def part_two(text: str) -> int:
    party = _parse(text)
    party.add_attendee("Myself")
    return best_happiness(party)