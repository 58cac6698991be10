"""Escaped string literals: measuring escapes and re-encoding them."""

from __future__ import annotations

from collections.abc import Iterable


def count_chars(text: str) -> int:
    """Characters of code in a quoted literal beyond those in its value."""
    unused = 0
    chars = iter(text)
    for ch in chars:
        if ch == '"':
            unused += 1
        elif ch == "\\":
            escaped = next(chars, None)
            if escaped in ("\\", '"'):
                unused += 1
            elif escaped == "x":
                next(chars, None)
                next(chars, None)
                unused += 3
    return unused


def encode_string(text: str) -> str:
    """Encode a quoted literal as a new quoted literal, escaping its escapes."""
    parts = ['"']
    chars = iter(text)
    for ch in chars:
        if ch == '"':
            parts.append('\\"')
        elif ch == "\\":
            escaped = next(chars, None)
            if escaped == "\\":
                parts.append("\\\\\\\\")
            elif escaped == '"':
                parts.append('\\\\\\"')
            elif escaped == "x":
                hex_digits = next(chars, "") + next(chars, "")
                parts.append("\\\\x" + hex_digits)
        else:
            parts.append(ch)
    parts.append('"')
    return "".join(parts)


def part_one(lines: Iterable[str]) -> int:
    return sum(count_chars(line) for line in lines)


def part_two(lines: Iterable[str]) -> int:
    return sum(len(encode_string(line)) - len(line) for line in lines)