"""Finding which Aunt Sue sent the gift from the facts known about her."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

_AUNT = re.compile(r"Sue (\d+)")
_PROPERTY = re.compile(r"(\w+): (\d+)")

_GREATER = frozenset({"cats", "trees"})
_FEWER = frozenset({"pomeranians", "goldfish"})


@dataclass
class Aunt:
    id: int
    properties: dict[str, int] = field(default_factory=dict)

    @classmethod
    def parse(cls, line: str) -> Aunt:
        """Parse a line such as ``Sue 1: cars: 9, akitas: 3``."""
        match = _AUNT.search(line)
        if match is None:
            raise ValueError("Unable to parse input for Aunt.")
        properties = {name: int(value) for name, value in _PROPERTY.findall(line)}
        return cls(int(match.group(1)), properties)


def parse_facts(text: str) -> dict[str, int]:
    """The first ``name: value`` on each line; other lines are ignored."""
    facts = {}
    for line in text.splitlines():
        match = _PROPERTY.search(line)
        if match:
            facts[match.group(1)] = int(match.group(2))
    return facts


def parse_aunts(text: str) -> list[Aunt]:
    return [Aunt.parse(line) for line in text.splitlines() if line.strip()]


def find_aunts(aunts: Iterable[Aunt], facts: Mapping[str, int]) -> list[Aunt]:
    """Aunts whose known properties all equal the facts, in their given order."""
    return [
        aunt
        for aunt in aunts
        if all(
            aunt.properties[name] == value
            for name, value in facts.items()
            if name in aunt.properties
        )
    ]


def _consistent(name: str, remembered: int, fact: int) -> bool:
    if name in _GREATER:
        return remembered > fact
    if name in _FEWER:
        return remembered < fact
    return remembered == fact


def find_aunts_with_ranges(aunts: Iterable[Aunt], facts: Mapping[str, int]) -> list[Aunt]:
    """Like :func:`find_aunts`, but cats and trees are lower bounds and
    pomeranians and goldfish upper bounds."""
    return [
        aunt
        for aunt in aunts
        if all(
            _consistent(name, aunt.properties[name], value)
            for name, value in facts.items()
            if name in aunt.properties
        )
    ]