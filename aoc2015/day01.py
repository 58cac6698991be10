"""Floor-counting instructions: '(' goes up one floor, ')' goes down one."""

from itertools import accumulate

_STEPS = {"(": 1, ")": -1}


def _steps(text: str):
    for ch in text:
        try:
            yield _STEPS[ch]
        except KeyError:
            raise ValueError(f"Invalid input detected: {ch!r}") from None


def calc_floor(text: str) -> int:
    """Return the floor reached after following every instruction in ``text``."""
    return sum(_steps(text))


def basement_position(text: str) -> int:
    """Return the 1-based position of the first step into the basement, or -1."""
    for position, floor in enumerate(accumulate(_steps(text)), start=1):
        if floor == -1:
            return position
    return -1