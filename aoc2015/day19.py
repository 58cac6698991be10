"""Molecule replacements for the reindeer medicine machine."""

from __future__ import annotations

import re
import string
from collections.abc import Mapping, Sequence

_TRANSFORM = re.compile(r"(\w+) => (\w+)")
_LOWER = frozenset(string.ascii_lowercase)

Molecule = tuple[str, ...]


def split_elements(text: str) -> list[str]:
    """Split a molecule into element symbols.

    Each symbol is one character followed by any lower-case letters.
    """
    elements: list[str] = []
    for ch in text:
        if elements and ch in _LOWER:
            elements[-1] += ch
        else:
            elements.append(ch)
    return elements


def parse_input(text: str) -> tuple[dict[str, list[Molecule]], Molecule]:
    """Read the replacements up to the first blank line, then the molecule.

    Replacement lines that do not have the form ``A => BC`` are skipped.
    """
    transforms: dict[str, list[Molecule]] = {}
    lines = iter(text.splitlines())
    for line in lines:
        if not line:
            break
        match = _TRANSFORM.fullmatch(line)
        if match:
            source, target = match.groups()
            transforms.setdefault(source, []).append(tuple(split_elements(target)))
    molecule = tuple(split_elements(next(lines, "")))
    return transforms, molecule


def distinct_molecules(
    transforms: Mapping[str, Sequence[Sequence[str]]], molecule: Sequence[str]
) -> set[Molecule]:
    """Every molecule reachable by one replacement of one element."""
    molecule = tuple(molecule)
    results: set[Molecule] = set()
    for position, element in enumerate(molecule):
        for replacement in transforms.get(element, ()):
            results.add(
                molecule[:position] + tuple(replacement) + molecule[position + 1 :]
            )
    return results


def part_one(text: str) -> int:
    """Number of distinct molecules after a single replacement."""
    transforms, molecule = parse_input(text)
    return len(distinct_molecules(transforms, molecule))