"""The look-and-say sequence."""

from __future__ import annotations

from itertools import groupby

PUZZLE_INPUT = "1113222113"


def look_and_say(text: str) -> str:
    """Describe ``text`` as runs of repeated characters: count then character."""
    return "".join(f"{sum(1 for _ in run)}{digit}" for digit, run in groupby(text))


def look_and_say_length(text: str, rounds: int) -> int:
    """Length of the result of applying look-and-say ``rounds`` times."""
    for _ in range(rounds):
        text = look_and_say(text)
    return len(text)