"""Naughty-or-nice string rules."""

from __future__ import annotations

from collections.abc import Iterable

_VOWELS = frozenset("aeiou")
_BAD_PAIRS = ("ab", "cd", "pq", "xy")


def is_vowel(ch: str) -> bool:
    return ch in _VOWELS


def has_double(text: str) -> bool:
    """True if some letter appears twice in a row."""
    return any(a == b for a, b in zip(text, text[1:]))


def contains_bad_pair(text: str) -> bool:
    return any(bad in text for bad in _BAD_PAIRS)


def has_double_with_gap(text: str) -> bool:
    """True if some letter repeats with exactly one letter between."""
    return any(a == b for a, b in zip(text, text[2:]))


def contains_pair(text: str) -> bool:
    """True if a two-letter pair appears twice without overlapping."""
    return any(
        text[i : i + 2] in text[i + 2 :] for i in range(len(text) - 1)
    )


def is_nice(text: str) -> bool:
    """Three vowels, a doubled letter, and none of the forbidden pairs."""
    vowels = sum(1 for ch in text if is_vowel(ch))
    return vowels >= 3 and has_double(text) and not contains_bad_pair(text)


def is_nice2(text: str) -> bool:
    """A repeated non-overlapping pair and a letter repeated across a gap."""
    return has_double_with_gap(text) and contains_pair(text)


def part_one(lines: Iterable[str]) -> int:
    return sum(1 for line in lines if is_nice(line))


def part_two(lines: Iterable[str]) -> int:
    return sum(1 for line in lines if is_nice2(line))