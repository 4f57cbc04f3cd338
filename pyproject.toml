[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aockit"
version = "0.1.0"
description = "Advent of Code puzzle solutions (2021 and 2024) and small shared helper data structures"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "aoc", "puzzles"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc = "aockit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aockit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
