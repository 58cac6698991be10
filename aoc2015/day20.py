"""Elves delivering presents to an infinite street of houses."""

from __future__ import annotations

from math import isqrt

PUZZLE_INPUT = 29_000_000
HOUSE_LIMIT = 50


def _divisor_pairs(house: int):
    # A square house's root is yielded twice, once from each side of the pair.
    for elf in range(isqrt(house), 0, -1):
        if house % elf == 0:
            yield elf
            yield house // elf


def presents_at(house: int) -> int:
    """Presents at ``house`` when every elf ``n`` leaves ``10 * n`` at each
    multiple of ``n``."""
    return sum(10 * elf for elf in _divisor_pairs(house))


def presents_at_limited(house: int) -> int:
    """Presents at ``house`` when each elf ``n`` leaves ``11 * n`` but visits
    only its first fifty houses."""
    return sum(11 * elf for elf in _divisor_pairs(house) if house <= elf * HOUSE_LIMIT)


def _first(target: int, presents) -> int:
    house = 1
    while presents(house) < target:
        house += 1
    return house


def first_house(target: int = PUZZLE_INPUT) -> int:
    """Lowest house that gets at least ``target`` presents."""
    return _first(target, presents_at)


def first_house_limited(target: int = PUZZLE_INPUT) -> int:
    """Lowest house that gets at least ``target`` presents from limited elves."""
    return _first(target, presents_at_limited)