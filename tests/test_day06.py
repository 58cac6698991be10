import pytest

from aoc2015.day06 import Action, Command, parse_commands, part_one, part_two


def test_parse_turn_on():
    command = Command.parse("turn on 0,0 through 999,999")
    assert command == Command(Action.TURN_ON, (0, 0), (999, 999))


def test_parse_turn_off():
    command = Command.parse("turn off 499,499 through 500,500")
    assert command == Command(Action.TURN_OFF, (499, 499), (500, 500))


def test_parse_toggle():
    command = Command.parse("toggle 0,0 through 999,0")
    assert command == Command(Action.TOGGLE, (0, 0), (999, 0))


def test_parse_rejects_missing_coordinates():
    with pytest.raises(ValueError):
        Command.parse("turn on everything")


def test_parse_commands_skips_blank_lines():
    commands = parse_commands("turn on 1,2 through 3,4\n\ntoggle 5,6 through 7,8\n")
    assert [c.action for c in commands] == [Action.TURN_ON, Action.TOGGLE]
    assert commands[1].start == (5, 6)


def test_part_one_whole_grid():
    assert part_one([Command.parse("turn on 0,0 through 999,999")]) == 1_000_000


def test_part_one_toggle_twice_is_dark():
    toggle = Command.parse("toggle 10,10 through 20,30")
    assert part_one([toggle, toggle]) == 0


def test_part_one_on_then_off_is_dark():
    commands = parse_commands(
        "turn on 5,5 through 50,50\nturn off 5,5 through 50,50\n"
    )
    assert part_one(commands) == 0


def test_part_one_toggle_matches_turn_on_from_dark():
    on = [Command.parse("turn on 3,4 through 40,70")]
    toggle = [Command.parse("toggle 3,4 through 40,70")]
    assert part_one(on) == part_one(toggle)


def test_part_two_toggle_is_double_brightness():
    toggle = [Command.parse("toggle 0,0 through 999,0")]
    assert part_two(toggle) == 2 * part_one(toggle)


def test_part_two_turn_off_never_negative():
    assert part_two([Command.parse("turn off 0,0 through 999,999")]) == 0


def test_part_two_turn_on_accumulates():
    on = Command.parse("turn on 7,7 through 9,12")
    assert part_two([on, on, on]) == 3 * part_one([on])