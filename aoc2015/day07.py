"""A circuit of 16-bit wires connected by bitwise logic gates."""

from __future__ import annotations

import operator
import re
from dataclasses import dataclass

MASK = 0xFFFF

_NUMBER = re.compile(r"[0-9]+")
_WIRE = re.compile(r"[a-z]+")
_BINARY = {
    "AND": operator.and_,
    "OR": operator.or_,
    "LSHIFT": operator.lshift,
    "RSHIFT": operator.rshift,
}


class CircuitError(ValueError):
    """Raised for malformed statements and wires whose value cannot be found."""


@dataclass(frozen=True)
class _Gate:
    op: str | None
    operands: tuple[int | str, ...]


def _operand(token: str) -> int | str:
    if _NUMBER.fullmatch(token):
        return int(token) & MASK
    if _WIRE.fullmatch(token):
        return token
    raise CircuitError(f"Invalid operand: {token!r}")


class Circuit:
    """Wires fed by gates; each wire's signal is computed on demand and cached."""

    def __init__(self) -> None:
        self._inputs: dict[str, _Gate] = {}
        self._wires: set[str] = set()
        self._cache: dict[str, int] = {}

    def add_statement(self, line: str) -> None:
        """Add a statement such as ``x AND y -> d``; a later one for a wire wins."""
        tokens = line.split()
        if len(tokens) < 3 or tokens[-2] != "->":
            raise CircuitError(f"Invalid statement: {line!r}")
        target = tokens[-1]
        if not _WIRE.fullmatch(target):
            raise CircuitError(f"Invalid output wire: {target!r}")
        lhs = tokens[:-2]
        if len(lhs) == 1:
            gate = _Gate(None, (_operand(lhs[0]),))
        elif len(lhs) == 2 and lhs[0] == "NOT":
            gate = _Gate("NOT", (_operand(lhs[1]),))
        elif len(lhs) == 3 and lhs[1] in _BINARY:
            gate = _Gate(lhs[1], (_operand(lhs[0]), _operand(lhs[2])))
        else:
            raise CircuitError(f"Invalid expression: {' '.join(lhs)!r}")

        self._inputs[target] = gate
        self._wires.add(target)
        self._wires.update(o for o in gate.operands if isinstance(o, str))
        self._cache.clear()

    def _compute(self, gate: _Gate) -> int:
        values = [self._cache[o] if isinstance(o, str) else o for o in gate.operands]
        if gate.op is None:
            return values[0]
        if gate.op == "NOT":
            return ~values[0] & MASK
        return _BINARY[gate.op](values[0], values[1]) & MASK

    def value(self, wire: str) -> int:
        """Return the signal on ``wire``."""
        if wire in self._cache:
            return self._cache[wire]
        stack = [wire]
        expanding: set[str] = set()
        while stack:
            name = stack[-1]
            if name in self._cache:
                stack.pop()
                continue
            gate = self._inputs.get(name)
            if gate is None:
                raise CircuitError(f"Wire {name} has no input")
            pending = [
                o for o in gate.operands if isinstance(o, str) and o not in self._cache
            ]
            if pending and name not in expanding:
                expanding.add(name)
                for child in pending:
                    if child in expanding:
                        raise CircuitError(f"Wire {child} depends on itself")
                    stack.append(child)
                continue
            if pending:
                raise CircuitError(f"Wire {name} depends on itself")
            self._cache[name] = self._compute(gate)
            expanding.discard(name)
            stack.pop()
        return self._cache[wire]

    def values(self) -> dict[str, int]:
        """Signals of every wire named in the circuit, ordered by wire name."""
        return {wire: self.value(wire) for wire in sorted(self._wires)}


def parse_circuit(text: str) -> Circuit:
    """Build a circuit from one statement per line; blank lines are skipped."""
    circuit = Circuit()
    for line in text.splitlines():
        if line.strip():
            circuit.add_statement(line)
    return circuit