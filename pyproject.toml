[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2015"
version = "0.1.0"
description = "Solutions to the 2015 Advent of Code puzzles as an importable library"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "2015"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aoc2015"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
