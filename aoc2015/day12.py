"""Summing the numbers in a JSON document."""

from __future__ import annotations

import json
from typing import Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def sum_numbers(data: Any) -> int | float:
    """Sum of every number anywhere in the parsed JSON ``data``."""
    if _is_number(data):
        return data
    if isinstance(data, dict):
        return sum(sum_numbers(value) for value in data.values())
    if isinstance(data, list):
        return sum(sum_numbers(value) for value in data)
    return 0


def sum_numbers_without_red(data: Any) -> int | float:
    """Like :func:`sum_numbers`, ignoring any object with a value of ``"red"``."""
    if _is_number(data):
        return data
    if isinstance(data, dict):
        if "red" in (v for v in data.values() if isinstance(v, str)):
            return 0
        return sum(sum_numbers_without_red(value) for value in data.values())
    if isinstance(data, list):
        return sum(sum_numbers_without_red(value) for value in data)
    return 0


def part_one(text: str) -> int | float:
    return sum_numbers(json.loads(text))


def part_two(text: str) -> int | float:
    return sum_numbers_without_red(json.loads(text))