# snowcalc

Solvers for a series of December calendar puzzles, one module per day.
Each day module reads the puzzle input as a list of text lines and
offers functions that return the answer, mostly `part_one` and
`part_two`.

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

Each module installs its own command. Commands that read a puzzle
input take the file path as an optional positional argument; without
it they read a default path under `./data/`.

| Command | Options |
| --- | --- |
| `snowcalc-day01 [path]` | `--part {1,2}` |
| `snowcalc-day02 [path]` | `--part {1,2}` |
| `snowcalc-day03 [path]` | `--part {1,2}` |
| `snowcalc-day04 [path]` | `--part {1,2}` |
| `snowcalc-day05 [path]` | `--part {1,2}` |
| `snowcalc-day06 [path]` | `--part {1,2}` |
| `snowcalc-day07 [path]` | `--part {1,2}` |
| `snowcalc-day08 [path]` | `--part {1,2}`, `--start`, `--end`, `--count` |
| `snowcalc-day09 [path]` | `--part {1,2}` |
| `snowcalc-day12-arrangements [path]` | none |
| `snowcalc-day12-constellations [path]` | none |
| `snowcalc-day12-first-fit [path]` | none |
| `snowcalc-triangles` | `--base` (default 7), `--order` (default 4) |

For example:

```
snowcalc-day01 calibration.txt --part 2
snowcalc-triangles --base 7 --order 4
```

`snowcalc-day08 --part 1` walks from `--start` and prints
`steps, steps_since_last` each time it reaches `--end`. The walk never
stops by itself; pass `--count N` to stop after `N` arrivals.

## Library use

Read an input file with `snowcalc.inputs.read_lines` and hand the lines
to a day module:

```python
from snowcalc import day01, day06, day09
from snowcalc.inputs import read_lines

lines = read_lines("calibration.txt")
print(day01.part_one(lines))
print(day01.part_two(lines))

races = ["Time:      7  15   30", "Distance:  9  40  200"]
print(day06.part_one(races))   # product of the ways to win each race
print(day06.part_two(races))   # ways to win the single joined race

print(day09.predict_next([0, 3, 6, 9, 12, 15]))   # 18
```

Malformed input raises `ValueError` (or `KeyError` for an unknown node
in `day08`).

## Modules

| Module | Puzzle |
| --- | --- |
| `snowcalc.inputs` | `read_lines(path)`: lines of a text file |
| `snowcalc.day01` | calibration values, digits and spelled-out numbers |
| `snowcalc.day02` | cube games: possible games and game power |
| `snowcalc.day03` | engine schematic: part numbers and gear ratios |
| `snowcalc.day04` | scratchcards: points and card copies |
| `snowcalc.day05` | seed almanac: lowest location for seeds and seed ranges |
| `snowcalc.day06` | boat races: ways to beat the record |
| `snowcalc.day07` | camel cards, with and without jokers |
| `snowcalc.day08` | desert network: arrivals, path lengths and combined cycle |
| `snowcalc.day09` | sensor histories: next and previous values |
| `snowcalc.day12_arrangements` | spring records: brute-force arrangement count |
| `snowcalc.day12_constellations` | spring records: fragment-based first placement |
| `snowcalc.day12_first_fit` | spring records: left-leaning first fit |
| `snowcalc.triangles` | triangular numbers of higher order |

## What it does not do

- There is no single command that runs every day; each module has its
  own command.
- `day08` has no `part_one` function; the first part is the endless
  walk offered by `arrivals` and `snowcalc-day08 --part 1`.
- Only `day12_arrangements` counts spring arrangements, by trying every
  placement, so it is slow on long records. `day12_constellations`
  only builds and reports the first placement of the groups (its
  command's total is one per line), and `day12_first_fit` only tells
  whether a first fit has slack. Unfolded records from `expand` are not
  counted.