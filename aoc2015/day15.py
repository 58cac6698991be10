"""Cookie recipes: choosing ingredient amounts for the best score."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from math import prod

TEASPOONS = 100

_INGREDIENT = re.compile(
    r"([A-Z]\w+)\: capacity (-?\d+), durability (-?\d+), flavor (-?\d+), "
    r"texture (-?\d+), calories (-?\d+)"
)


@dataclass(frozen=True)
class Ingredient:
    name: str = ""
    capacity: int = 0
    durability: int = 0
    flavor: int = 0
    texture: int = 0
    calories: int = 0

    @classmethod
    def parse(cls, line: str) -> Ingredient:
        """Parse a line such as ``Sugar: capacity 3, durability 0, ...``."""
        match = _INGREDIENT.search(line)
        if match is None:
            raise ValueError(f"Invalid ingredient: {line!r}")
        name, *values = match.groups()
        return cls(name, *(int(value) for value in values))


def _compositions(parts: int, total: int) -> Iterator[tuple[int, ...]]:
    """Every way to split ``total`` into ``parts`` non-negative amounts."""
    if parts == 1:
        yield (total,)
        return
    for first in range(total + 1):
        for rest in _compositions(parts - 1, total - first):
            yield (first, *rest)


@dataclass
class Recipe:
    """Ingredients keyed by name; amounts are given in name order."""

    ingredients: dict[str, Ingredient] = field(default_factory=dict)
    name: str = ""

    def _ordered(self) -> list[Ingredient]:
        return [self.ingredients[key] for key in sorted(self.ingredients)]

    def _pairs(self, amounts: Sequence[int]) -> list[tuple[int, Ingredient]]:
        ordered = self._ordered()
        if len(amounts) != len(ordered):
            raise ValueError(
                f"Expected {len(ordered)} amounts, got {len(amounts)}"
            )
        return list(zip(amounts, ordered))

    def score(self, amounts: Sequence[int]) -> int:
        """Product of the property totals; zero if any total is negative."""
        pairs = self._pairs(amounts)
        totals = [
            sum(amount * getattr(ingredient, prop) for amount, ingredient in pairs)
            for prop in ("capacity", "durability", "flavor", "texture")
        ]
        if any(total < 0 for total in totals):
            return 0
        return prod(totals)

    def calories(self, amounts: Sequence[int]) -> int:
        return sum(amount * ingredient.calories for amount, ingredient in self._pairs(amounts))

    def _all_amounts(self) -> Iterator[tuple[int, ...]]:
        if not self.ingredients:
            raise ValueError("Recipe has no ingredients")
        return _compositions(len(self.ingredients), TEASPOONS)

    def find_best_score(self) -> int:
        """Best score over every split of the teaspoons."""
        return max((self.score(a) for a in self._all_amounts()), default=0) if self.ingredients else self._empty()

    def find_best_score_for_calories(self, calories: int) -> int:
        """Best score among splits with exactly ``calories`` calories, or 0."""
        best = 0
        for amounts in self._all_amounts():
            if self.calories(amounts) == calories:
                best = max(best, self.score(amounts))
        return best

    def _empty(self) -> int:
        raise ValueError("Recipe has no ingredients")


def parse_recipe(text: str) -> Recipe:
    recipe = Recipe()
    for line in text.splitlines():
        if line.strip():
            ingredient = Ingredient.parse(line)
            recipe.ingredients[ingredient.name] = ingredient
    return recipe