"""Command line entry point solving the puzzles of each year and day."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from aockit.download import download_input
from aockit.y2021 import day02 as y2021_day02
from aockit.y2021 import day03 as y2021_day03
from aockit.y2021 import day04 as y2021_day04
from aockit.y2021 import day05 as y2021_day05
from aockit.y2021 import day06 as y2021_day06
from aockit.y2021 import day07 as y2021_day07
from aockit.y2021 import day08 as y2021_day08
from aockit.y2021 import day09 as y2021_day09
from aockit.y2021 import day10 as y2021_day10
from aockit.y2021 import day11 as y2021_day11
from aockit.y2021 import day12 as y2021_day12
from aockit.y2021 import day13 as y2021_day13
from aockit.y2024 import day00 as y2024_day00
from aockit.y2024 import day01 as y2024_day01
from aockit.y2024 import day02 as y2024_day02
from aockit.y2024 import day03 as y2024_day03

logger = logging.getLogger(__name__)

Solver = Callable[[Optional[int], str, Sequence[str]], str]

_LEVELS = {0: logging.WARNING, 1: logging.INFO, 2: logging.DEBUG}


def _need_part(part: Optional[int]) -> int:
    if part not in (1, 2):
        raise ValueError(f"part {part} does not exist")
    return part


def _need_number(extra: Sequence[str], what: str) -> int:
    if len(extra) != 1:
        raise ValueError(f"expected exactly one argument: {what}")
    return int(extra[0])


def _lines(raw: str) -> list[str]:
    return raw.strip("\n").split("\n")


def _dive(part, raw, extra):
    horizontal, depth = y2021_day02.navigate(y2021_day02.parse_commands(raw))
    return f"distance: {horizontal * depth}"


def _diagnostic(part, raw, extra):
    rows = y2021_day03.parse_report(raw)
    if _need_part(part) == 1:
        return f"power consumption: {y2021_day03.power_consumption(rows)}"
    return f"life support rating: {y2021_day03.life_support_rating(rows)}"


def _bingo(part, raw, extra):
    _, cards = y2021_day04.parse_game(raw)
    winners = y2021_day04.play(raw)
    lines = []
    if winners:
        first = winners[0]
        lines.append(f"first card {first.first} completed with score: {first.second}")
    if winners and len(winners) == len(cards):
        last = winners[-1]
        lines.append(f"last card {last.first} completed with score: {last.second}")
    return "\n".join(lines)


def _vents(part, raw, extra):
    lines = y2021_day05.parse_lines(raw)
    return f"dangerous areas: {y2021_day05.count_dangerous_areas(lines)}"


def _lanternfish(part, raw, extra):
    days = _need_number(extra, "days")
    return f"fish after {days} days: {y2021_day06.simulate(raw, days)}"


def _crabs(part, raw, extra):
    positions = y2021_day07.parse_positions(raw)
    if _need_part(part) == 1:
        return f"lowest: {y2021_day07.lowest_fuel(positions)}"
    return f"lowest: {y2021_day07.lowest_fuel_exp(positions)}"


def _segments(part, raw, extra):
    entries = y2021_day08.parse_entries(raw)
    if _need_part(part) == 1:
        return str(y2021_day08.count_easy_digits(entries))
    return str(y2021_day08.sum_outputs(entries))


def _smoke(part, raw, extra):
    heightmap = y2021_day09.parse_heightmap(raw)
    if _need_part(part) == 1:
        return str(y2021_day09.risk_level_sum(heightmap))
    return str(y2021_day09.basin_product(heightmap))


def _syntax(part, raw, extra):
    lines = _lines(raw)
    if _need_part(part) == 1:
        return str(y2021_day10.syntax_error_score(lines))
    return str(y2021_day10.middle_autocomplete_score(lines))


def _octopus(part, raw, extra):
    octomap = y2021_day11.parse_octomap(raw)
    if _need_part(part) == 1:
        steps = _need_number(extra, "steps")
        return str(y2021_day11.count_flashes(octomap, steps))
    return str(y2021_day11.first_sync_step(octomap))


def _caves(part, raw, extra):
    jokers = 0 if _need_part(part) == 1 else 1
    return str(y2021_day12.count_paths(y2021_day12.parse_caves(raw), jokers))


def _origami(part, raw, extra):
    if _need_part(part) == 1:
        return str(y2021_day13.first_fold_dots(raw))
    return y2021_day13.fold_all(raw)


def _y2024(module) -> Solver:
    def solve(part, raw, extra):
        return f"Result: {module.execute_part(_need_part(part), raw)}"

    return solve


_PUZZLES: dict[int, dict[int, Solver]] = {
    2021: {
        2: _dive,
        3: _diagnostic,
        4: _bingo,
        5: _vents,
        6: _lanternfish,
        7: _crabs,
        8: _segments,
        9: _smoke,
        10: _syntax,
        11: _octopus,
        12: _caves,
        13: _origami,
    },
    2024: {
        0: _y2024(y2024_day00),
        1: _y2024(y2024_day01),
        2: _y2024(y2024_day02),
        3: _y2024(y2024_day03),
    },
}


def _solver(year: int, day: int) -> Solver:
    try:
        return _PUZZLES[year][day]
    except KeyError:
        raise ValueError(f"no puzzle for {year} day {day:02d}") from None


def run(
    year: int,
    day: int,
    part: Optional[int],
    raw_input: str,
    extra: Sequence[str] = (),
) -> str:
    """Solve one puzzle and return the text to show for it."""
    return _solver(year, day)(part, raw_input, tuple(extra))


def _number_after(text: str, prefix: str) -> int:
    rest = text[len(prefix):]
    if not text.startswith(prefix) or not rest.isdigit():
        raise ValueError(f"expected {prefix}<number>, got {text!r}")
    return int(rest)


def _configure_logging(verbose: int) -> None:
    level = _LEVELS.get(verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)
    logger.log(level, "logging level set to %s", logging.getLevelName(level))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aoc", description="All in one AdventOfCode binary")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="verbose output")
    parser.add_argument("--input", type=Path, help="puzzle input file")
    parser.add_argument("--resources", default="resources", help="directory of puzzle inputs")
    parser.add_argument("--session", help="session cookie for downloadInput")
    parser.add_argument("year", type=int)
    parser.add_argument("command", help="dayNN or downloadInput")
    parser.add_argument("args", nargs="*", help="part1|part2 and further arguments")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    options = _build_parser().parse_args(argv)
    _configure_logging(options.verbose)
    try:
        if options.command == "downloadInput":
            if len(options.args) != 1:
                raise ValueError("downloadInput takes exactly one day, 01 to 25")
            session = options.session or os.environ.get("AOC_SESSION", "")
            download_input(options.year, options.args[0], session, options.resources)
            return 0
        day = _number_after(options.command, "day")
        _solver(options.year, day)
        part: Optional[int] = None
        extra = list(options.args)
        if extra and extra[0].startswith("part"):
            part = _number_after(extra.pop(0), "part")
        path = options.input or (
            Path(options.resources) / str(options.year) / f"day{day:02d}" / "input.txt"
        )
        raw_input = path.read_text()
        print(run(options.year, day, part, raw_input, extra))
    except (ValueError, OSError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())