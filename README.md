# aoc2015

Solutions to the 2015 Advent of Code puzzles, as a Python library. Each day
that is solved has its own module. The package includes these modules:

`day01`, `day02`, `day03`, `day05`, `day06`, `day07`, `day08`, `day09`,
`day10`, `day12`, `day13`, `day14`, `day15`, `day16`, `day17`, `day18`,
`day19`, `day20` and `day23`.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Usage

The functions take the puzzle input as a string, or as a list of lines. You
read the file yourself and pass its contents in.

```python
from aoc2015.day01 import calc_floor, basement_position
from aoc2015.day05 import is_nice, is_nice2
from aoc2015.day10 import look_and_say, look_and_say_length
from aoc2015.day12 import part_one, part_two

calc_floor("(()(()(")          # 3
basement_position("()())")     # 5
is_nice("ugknbfddgicrmopn")    # True
is_nice2("qjhvhtzxzqqjkmpb")   # True
look_and_say("1211")           # "111221"

part_one("[1,2,3]")                         # 6
part_two('[1,{"c":"red","b":2},3]')         # 4
```

Days that read structured input come with parsers, for example
`day02.parse_presents`, `day06.parse_commands`, `day07.parse_circuit`,
`day14.parse_reindeer`, `day15.parse_recipe` and `day16.parse_aunts`. Some days
have `part_one` / `part_two` functions. Others have functions named after the
question they answer, such as `day14.race_distance`, `day14.race_points`,
`day18.run_lights`, `day20.first_house` and `day20.first_house_limited`.

Circuit of wires for day 7:

```python
from aoc2015.day07 import parse_circuit

circuit = parse_circuit("123 -> x\nNOT x -> h\n")
circuit.value("h")    # 65412
circuit.values()      # {"h": 65412, "x": 123}
```

Assembly computer for day 23:

```python
from aoc2015.day23 import Computer

computer = Computer.from_text("inc a\njio a, +2\ntpl a\ninc a\n")
computer.run()
computer.a            # 2
```

## What the package does not do

- There is no command-line program. To get a day's answers, you import its
  module and call its functions.
- Not every day of the 2015 calendar is covered. Only the days listed above
  have a module.
- The package does not read input files or fetch puzzle input.

## Tests

```
pytest
```