# aockit

Solutions for a selection of Advent of Code puzzles from 2021 and 2024,
together with the small helpers they share: sparse coordinate grids, a float
vector type, a decimal big-number type, a stack and sequence utilities.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command, `aoc`:

```
aoc [-v] [--input FILE] [--resources DIR] [--session COOKIE] YEAR COMMAND [ARGS ...]
```

`COMMAND` is either `dayNN` (for example `day06`) or `downloadInput`.

For a day, the first argument may be `part1` or `part2`; any further
arguments are passed on to the puzzle. The input is read from `--input`, or
by default from `<resources>/<year>/dayNN/input.txt` (`--resources` defaults
to `resources`). The answer is printed on standard output.

```
aoc --input input.txt 2024 day01 part1
aoc 2021 day06 80              # number of fish after 80 days
aoc 2021 day11 part1 100       # flashes after 100 steps
aoc 2021 day13 part2           # prints the folded sheet as # and .
aoc -vv 2021 day10 part2
```

`-v` may be repeated: none shows warnings only, `-v` adds info messages and
`-vv` debug messages.

Available puzzles:

| Year | Days | Notes |
|------|------|-------|
| 2021 | 02 – 13 | day02, day04 and day05 ignore the part; day06 takes the number of days; day11 part1 takes the number of steps |
| 2024 | 00 – 03 | day00 is a template that answers 0; day02 part2 always answers 0 |

`downloadInput` fetches your personal input for one day (`01` to `25`) into
`<resources>/<year>/dayNN/input.txt`. It needs your session cookie, given
with `--session` or the `AOC_SESSION` environment variable:

```
AOC_SESSION=placeholder aoc 2024 downloadInput 05
```

Errors such as a missing input file, an unknown day or part, or malformed
input are reported on standard error with exit status 1.

## Library use

Each puzzle is a module under `aockit.y2021` or `aockit.y2024`. The 2024
days share one shape: `prepare_input(raw_input)`, `part1(prepared)`,
`part2(prepared)` and `execute_part(part, raw_input)`.

```python
from aockit.y2024 import day01

with open("input.txt") as handle:
    prepared = day01.prepare_input(handle.read())
print(day01.part1(prepared), day01.part2(prepared))
```

The 2021 days expose functions named for what they compute, for example
`aockit.y2021.day06.simulate(raw_input, days)`,
`aockit.y2021.day10.syntax_error_score(lines)` or
`aockit.y2021.day13.fold_all(raw_input)`.

`aockit.cli.run(year, day, part, raw_input, extra)` solves one puzzle and
returns the text the command would print.

Shared helpers:

- `aockit.grid` – `Map`, `CoordinateSystem`, `SingleSliceMap`, `MapElem`
- `aockit.vector` – `Vector`, `to_vector`, `zero` and the `UP`, `DOWN`,
  `LEFT`, `RIGHT` unit vectors
- `aockit.bignum` – `WorryLevel`, `new_worry_level`
- `aockit.stack` – `Stack`
- `aockit.sequences` – `sliding_window`, `combine`, `slice_map`,
  `chunk_slice`, `split_slice`, `insert_unique`, `remove_dups`,
  `intersection`, `reverse`, and the `Pair` tuple
- `aockit.download` – `input_url` and `download_input`

## What it does not do

Only the years and days listed above are solved; the command reports any
other day as having no puzzle. Puzzle inputs are not bundled with the
package: provide them with `--input`, place them under the resources
directory, or fetch them with `downloadInput`.