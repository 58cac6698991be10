import pytest

from aoc2015.day23 import Computer, Instruction, OpCode, Register

SAMPLE = "inc a\njio a, +2\ntpl a\ninc a\n"


def test_parse_register_instruction():
    assert Instruction.parse("inc a") == Instruction(OpCode.INC, Register.A, 0)


def test_parse_jump_with_register_and_offset():
    assert Instruction.parse("jio a, +2") == Instruction(OpCode.JIO, Register.A, 2)


def test_parse_jump_negative_offset():
    instruction = Instruction.parse("jmp -7")
    assert instruction.opcode is OpCode.JMP
    assert instruction.literal == -7
    assert instruction.reg is None


def test_parse_unsigned_jump_offset_is_rejected():
    with pytest.raises(ValueError):
        Instruction.parse("jmp 5")


@pytest.mark.parametrize("line", ["inc c", "foo a", "hlf", "jie b"])
def test_parse_invalid(line):
    with pytest.raises(ValueError):
        Instruction.parse(line)


def test_str_round_trips_opcode_and_register():
    text = str(Instruction.parse("jie b, +4"))
    assert text.split() == ["jie", "b", "4"]


def test_run_sample_program():
    computer = Computer.from_text(SAMPLE)
    computer.run()
    assert computer.reg(Register.A) == 2
    assert computer.reg("b") == 0
    assert computer.pc == len(computer.instructions)


def test_step_advances_one_instruction():
    computer = Computer.from_text(SAMPLE)
    assert computer.step() is True
    assert computer.pc == 1
    assert computer.a == 1


def test_step_outside_program_does_nothing():
    computer = Computer.from_text("inc b")
    computer.pc = 1
    assert computer.step() is False
    assert computer.b == 0


def test_hlf_truncates():
    computer = Computer.from_text("hlf a")
    computer.a = 7
    computer.run()
    assert computer.a == 3


def test_tpl_triples():
    computer = Computer.from_text("tpl b\ntpl b")
    computer.b = 2
    computer.run()
    assert computer.b == 2 * 3 * 3


def test_jie_jumps_only_on_even():
    even = Computer.from_text("jie a, +2\ninc b\ninc b")
    even.run()
    odd = Computer.from_text("jie a, +2\ninc b\ninc b")
    odd.a = 1
    odd.run()
    assert even.b + 1 == odd.b


def test_jio_jumps_only_on_one():
    computer = Computer.from_text("jio a, +2\ninc b\ninc b")
    computer.a = 1
    computer.run()
    assert computer.b == 1


def test_jmp_out_of_program_halts():
    computer = Computer.from_text("jmp -1\ninc a")
    computer.run()
    assert computer.pc == -1
    assert computer.a == 0


def test_reg_invalid_register():
    with pytest.raises(ValueError):
        Computer().reg("c")