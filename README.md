# aoc25

Solutions to the 2025 Advent of Code puzzles for days 1 to 7, with the small
helper library they are built on. The helpers cover integer maths, 2D and 3D
vectors, matrix operations, parsing grids into linked nodes, and string and
list padding.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running a puzzle

Put your puzzle inputs in an `inputs` directory in the directory you run the
command from. Name each file `input-<day>.txt`, or `input-<day>-test.txt` for
the example input. Leading and trailing whitespace in the file is removed
before solving. Then run:

```
aoc25 <day> <part>
aoc25 <day> <part> test
```

With `test` as the third argument the command reads the example input.
`--inputs DIR` reads the files from another directory. The answer is printed
to standard output, and the solver's runtime in microseconds and
milliseconds is printed to standard error. If there is no solution for the
day and part you ask for, the command reports an error.

Solutions exist for both parts of days 1 to 6, and for part 1 of day 7.

## Using the library

```python
from aoc25 import day01, grid, matrix
from aoc25.runner import run
from aoc25.vectors import Vector2

day01.part1("L68\nL30\nR48")         # each part returns its answer as an int
run(1, 2, "L68\nL30\nR48")           # same, choosing day and part by number

cells = grid.parse_grid("ab\ncd")    # columns first: cells[x][y]
rotated = matrix.rotate([[1, 2], [3, 4]])   # a quarter turn clockwise
Vector2(1, 2) + Vector2(3, 4)        # Vector2(x=4, y=6)
```

Modules:

- `aoc25.day01` to `aoc25.day07` hold the solutions, each with `part1` and
  (apart from day 7) `part2` functions that take the input text.
- `aoc25.runner` holds `run(day, part, text)` and the `main` command.
- `aoc25.inputs` reads input files with `load_input` and `load_test_input`.
- `aoc25.intmath`, `aoc25.vectors`, `aoc25.matrix`, `aoc25.grid`,
  `aoc25.sequences`, `aoc25.textpad` and `aoc25.functional` are the helpers.
- `aoc25.color.to_hsl` converts 8-bit RGB to hue, saturation and lightness.
- `aoc25.runconfig` reads and adds run configurations in an IDE workspace
  XML file (`has_run_configuration`, `add_run_configuration`).
- `aoc25.imagesearch.ImageSearchClient(api_key="placeholder", endpoint=...)`
  queries an image search service and returns thumbnails.
- `aoc25.imaging.resize` scales a Pillow image bilinearly to RGBA.

## What it does not do

- It does not download puzzle inputs or log in to the puzzle site; the input
  files must already be on disk.
- It does not create files for a new day or register new days with the
  `aoc25` command.
- Day 7 has no part 2.