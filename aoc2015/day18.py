"""An animated grid of lights following the rules of Conway's Life."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator

GRID_SIZE = 100
STEPS = 100


class LightGrid:
    """A grid of lights; stuck lights never change state."""

    def __init__(self, width: int = GRID_SIZE, height: int = GRID_SIZE) -> None:
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be positive")
        self.width = width
        self.height = height
        self._lit: set[tuple[int, int]] = set()
        self._stuck: set[tuple[int, int]] = set()

    def read(self, text: str) -> None:
        """Load rows of ``#`` (on) and ``.`` (off); rows past the height are ignored."""
        rows = text.splitlines()[: self.height]
        lit = set()
        for y, line in enumerate(rows):
            if len(line) != self.width:
                raise ValueError(f"Invalid input: row {y} has {len(line)} lights")
            lit.update((x, y) for x, ch in enumerate(line) if ch == "#")
        self._lit = {cell for cell in self._lit if cell[1] >= len(rows)} | lit

    def init_stuck(self) -> None:
        """Turn the four corner lights on and hold them there."""
        right, bottom = self.width - 1, self.height - 1
        corners = {(0, 0), (right, 0), (0, bottom), (right, bottom)}
        self._stuck |= corners
        self._lit |= corners

    def _neighbours(self, x: int, y: int) -> Iterator[tuple[int, int]]:
        for ny in range(max(y - 1, 0), min(y + 2, self.height)):
            for nx in range(max(x - 1, 0), min(x + 2, self.width)):
                if (nx, ny) != (x, y):
                    yield nx, ny

    def simulate(self) -> None:
        """Advance one step: a lit light stays on with 2 or 3 lit neighbours,
        an unlit one turns on with exactly 3."""
        counts = Counter(n for cell in self._lit for n in self._neighbours(*cell))
        lit = {
            cell
            for cell, n in counts.items()
            if n == 3 or (n == 2 and cell in self._lit)
        }
        self._lit = (lit - self._stuck) | (self._lit & self._stuck)

    def count(self) -> int:
        """Number of lights that are on."""
        return len(self._lit)

    def __str__(self) -> str:
        return "\n".join(
            "".join("#" if (x, y) in self._lit else "." for x in range(self.width))
            for y in range(self.height)
        )


def run_lights(
    text: str, steps: int = STEPS, stuck: bool = False, size: int = GRID_SIZE
) -> int:
    """Lights on after ``steps`` steps of a square grid read from ``text``."""
    grid = LightGrid(size, size)
    grid.read(text)
    if stuck:
        grid.init_stuck()
    for _ in range(steps):
        grid.simulate()
    return grid.count()