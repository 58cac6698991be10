"""Combinations of containers that hold an exact amount of eggnog."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

CONTAINERS = (20, 15, 10, 5, 5)
TARGET = 25


def parse_containers(text: str) -> list[int]:
    return [int(line) for line in text.splitlines() if line.strip()]


def _combinations(
    target: int, containers: Sequence[int], index: int, current: tuple[int, ...]
) -> Iterator[list[int]]:
    if target == 0:
        yield list(current)
        return
    if index == len(containers) or target < 0:
        return
    size = containers[index]
    yield from _combinations(target - size, containers, index, current + (size,))
    yield from _combinations(target, containers, index + 1, current)


def find_unique_combinations(target: int, containers: Sequence[int]) -> list[list[int]]:
    """Combinations summing to ``target``; each container may be used repeatedly.

    Combinations list containers in their given order, including the earlier
    one before skipping it.
    """
    if any(size <= 0 for size in containers):
        raise ValueError("Container sizes must be positive")
    return list(_combinations(target, list(containers), 0, ()))


def count_permutations(target: int, containers: Sequence[int]) -> int:
    """Ordered selections of distinct containers whose sizes sum to ``target``."""
    if target == 0:
        return 1
    return sum(
        count_permutations(target - size, [*containers[:i], *containers[i + 1 :]])
        for i, size in enumerate(containers)
        if target - size >= 0
    )


def part_one() -> int:
    """Number of combinations filling the sample target from the sample containers."""
    return len(find_unique_combinations(TARGET, sorted(CONTAINERS)))