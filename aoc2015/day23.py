"""A two-register computer running a tiny jump-and-arithmetic instruction set."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

_INSTRUCTION = re.compile(r"(\w+)(?:\s+)(\w+)?(?:,?)(?:\s+)?([\+-]?\d+)?")


class OpCode(Enum):
    HLF = "hlf"
    TPL = "tpl"
    INC = "inc"
    JMP = "jmp"
    JIE = "jie"
    JIO = "jio"


class Register(Enum):
    A = "a"
    B = "b"


def _register(name: str | None) -> Register:
    try:
        return Register(name)
    except ValueError:
        raise ValueError(f"Invalid register {name!r}") from None


def _literal(text: str | None, line: str) -> int:
    if text is None:
        raise ValueError(f"Invalid assembly {line!r}: missing offset")
    return int(text)


@dataclass(frozen=True)
class Instruction:
    """One instruction; ``reg`` is None for ``jmp``."""

    opcode: OpCode
    reg: Register | None = None
    literal: int = 0

    @classmethod
    def parse(cls, line: str) -> Instruction:
        """Parse a line such as ``inc a``, ``jmp +23`` or ``jio a, +2``."""
        match = _INSTRUCTION.fullmatch(line)
        if match is None:
            raise ValueError(f"Invalid assembly {line!r}")
        raw_opcode, raw_register, raw_literal = match.groups()
        try:
            opcode = OpCode(raw_opcode)
        except ValueError:
            raise ValueError(f"Invalid opcode {raw_opcode!r}") from None
        if opcode is OpCode.JMP:
            return cls(opcode, None, _literal(raw_literal, line))
        register = _register(raw_register)
        if opcode in (OpCode.JIE, OpCode.JIO):
            return cls(opcode, register, _literal(raw_literal, line))
        return cls(opcode, register)

    def __str__(self) -> str:
        reg = self.reg.value if self.reg is not None else "<invalid register>"
        return f"{self.opcode.value} {reg} {self.literal}"


def _halve(value: int) -> int:
    # Division truncates toward zero.
    return value // 2 if value >= 0 else -((-value) // 2)


@dataclass
class Computer:
    """A program with registers ``a`` and ``b`` and a program counter."""

    instructions: list[Instruction] = field(default_factory=list)
    a: int = 0
    b: int = 0
    pc: int = 0

    @classmethod
    def from_text(cls, text: str) -> Computer:
        """Load one instruction per line; blank lines are skipped."""
        return cls([Instruction.parse(line.strip()) for line in text.splitlines() if line.strip()])

    def reg(self, register: Register | str) -> int:
        """Value held in ``register``."""
        return getattr(self, _register_of(register).value)

    def _set(self, register: Register | str, value: int) -> None:
        setattr(self, _register_of(register).value, value)

    def _running(self) -> bool:
        return 0 <= self.pc < len(self.instructions)

    def _execute(self, instruction: Instruction) -> None:
        op = instruction.opcode
        if op is OpCode.JMP:
            self.pc += instruction.literal
            return
        value = self.reg(instruction.reg)
        if op is OpCode.HLF:
            self._set(instruction.reg, _halve(value))
            self.pc += 1
        elif op is OpCode.TPL:
            self._set(instruction.reg, value * 3)
            self.pc += 1
        elif op is OpCode.INC:
            self._set(instruction.reg, value + 1)
            self.pc += 1
        elif op is OpCode.JIE:
            self.pc += instruction.literal if value % 2 == 0 else 1
        elif op is OpCode.JIO:
            self.pc += instruction.literal if value == 1 else 1

    def step(self) -> bool:
        """Execute one instruction; False if the program counter is out of range."""
        if not self._running():
            return False
        self._execute(self.instructions[self.pc])
        return True

    def run(self) -> None:
        """Execute until the program counter leaves the program."""
        while self.step():
            pass


def _register_of(register: Register | str | None) -> Register:
    if isinstance(register, Register):
        return register
    return _register(register)