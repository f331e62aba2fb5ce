# adventpuzzles

Solutions to a selection of advent programming puzzles: days 1 to 4 of the
2015 event, and days 1 to 7 and 9 to 13 of the 2023 event. Each day lives in
its own module, named after the year and day (`adventpuzzles.y2015_day01`,
`adventpuzzles.y2023_day07`, and so on), and exposes the functions that solve
the puzzle as well as the smaller steps they are built from.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

Every day module has a `solve(text)` function that takes the full text of a
puzzle input and returns a tuple with the answer to each part the module
solves. The individual steps are available too:

```python
from adventpuzzles.y2015_day01 import final_floor, basement_position

final_floor("(()(()(")        # 3
basement_position("()())")    # 5
```

```python
from adventpuzzles.y2023_day01 import calibration_sum, spelled_calibration

calibration_sum(["1abc2", "pqr3stu8vwx", "a1b2c3d4e5f", "treb7uchet"])  # 142
spelled_calibration("eightwothree")                                   # 83
```

To solve a day from an input file, read the file and pass its text to `solve`:

```python
from pathlib import Path
from adventpuzzles import y2023_day09

y2023_day09.solve(Path("input").read_text())  # (part one, part two)
```

## Covered puzzles

| Module        | Puzzle                                          |
|---------------|-------------------------------------------------|
| `y2015_day01` | following floor instructions                    |
| `y2015_day02` | wrapping paper and ribbon for presents          |
| `y2015_day03` | counting houses visited, alone and with a robot |
| `y2015_day04` | mining MD5 hashes with five leading zeroes      |
| `y2023_day01` | calibration values, digits and spelled digits   |
| `y2023_day02` | cube games                                      |
| `y2023_day03` | engine part numbers and gear ratios             |
| `y2023_day04` | scratchcards                                    |
| `y2023_day05` | seed almanac                                    |
| `y2023_day06` | boat races                                      |
| `y2023_day07` | camel cards, with and without jokers            |
| `y2023_day09` | sequence extrapolation, forwards and backwards  |
| `y2023_day10` | pipe maze (first part only)                     |
| `y2023_day11` | expanding galaxies                              |
| `y2023_day12` | hot springs arrangements (first part only)      |
| `y2023_day13` | mirror reflections, with and without smudges    |

## What the package does not do

- It installs no command-line program. Puzzles are solved by calling the
  modules from Python, as shown above; reading the input file is left to the
  caller.
- Day 8 of the 2023 event (desert network navigation) is not included.
- For 2015 day 4 only the five-zero search is provided, and for 2023 days 10
  and 12 only the first part of each puzzle.