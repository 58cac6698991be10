import pytest

from aoc2015.day08 import count_chars, encode_string, part_one, part_two

EXAMPLES = ['""', '"abc"', '"aaa\\"aaa"', '"\\x27"']


@pytest.mark.parametrize(
    "literal,expected",
    [('""', 2), ('"abc"', 2), ('"aaa\\"aaa"', 3), ('"\\x27"', 5)],
)
def test_count_chars(literal, expected):
    assert count_chars(literal) == expected


def test_part_one_sums_lines():
    assert part_one(EXAMPLES) == 2 + 2 + 3 + 5


def test_encode_empty_literal():
    assert encode_string('""') == '"\\"\\""'


@pytest.mark.parametrize("literal", EXAMPLES)
def test_encoded_is_quoted_and_longer(literal):
    encoded = encode_string(literal)
    assert encoded.startswith('"') and encoded.endswith('"')
    assert len(encoded) > len(literal)


def test_encode_keeps_plain_text():
    assert encode_string("abc") == '"abc"'


def test_encode_hex_escape_keeps_digits():
    assert encode_string('"\\x27"') == '"\\"\\\\x27\\""'


def test_part_two_example_total():
    assert part_two(EXAMPLES) == 19


def test_empty_input():
    assert part_one([]) == 0
    assert part_two([]) == 0