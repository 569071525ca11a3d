# aocsolve

Solutions to the first four days of Advent of Code 2024. The package also has
a small tool that downloads your personal puzzle input.

## Installation

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Fetching puzzle input

The fetcher reads your Advent of Code session cookie from the `SESSION`
environment variable. If the variable is not set it stops at once with the
message "should have a session token set". It takes the day in the form
`day-01` and a directory to write into:

```
SESSION=token aoc-fetch --day day-01 --current-working-directory .
```

This prints the URL it requests
(`https://adventofcode.com/2024/day/1/input`), downloads the input for day 1
and writes it to both `./day-01/input1.txt` and `./day-01/input2.txt`, printing
each path as it is written. The `day-01` directory must already exist.

`--day` (short form `-d`) and `--current-working-directory` are both
required. A day that does not start with `day-` followed by a number is
rejected with a usage error. If the request fails, the error is printed and
the command exits with status 1. The response body is written as it comes;
the HTTP status is not checked.

## Solving a puzzle

Run `aocsolve` with a day (1 to 4) and a part (1 or 2); it prints the answer:

```
aocsolve 1 1
aocsolve 2 2
```

By default the input is read from `day-NN/inputP.txt` under the current
directory, for example `day-01/input1.txt` for day 1 part 1. Use `--input`
to read another file:

```
aocsolve 3 2 --input my-input.txt
```

If the input cannot be parsed, the command prints
`Error: process part P: ...` and exits with status 1.

## Using the library

Each day is a module with `part1` and `part2` functions that take the puzzle
text and return the answer as a string:

```python
from aocsolve import day01, day02, day03, day04

day01.part1("3   4\n4   3\n2   5\n1   3\n3   9\n3   3")  # "11"
day01.part2("3   4\n4   3\n2   5\n1   3\n3   9\n3   3")  # "31"
day03.part1("xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))")  # "161"
```

Other helpers:

- `day01.parse(text)` returns the left and right number columns as two
  lists. It raises `ValueError` if the text does not start with a line of
  two numbers.
- `day02.parse(text)` returns the reports as lists of levels and raises
  `ValueError` if there are none. `day02.is_safe(levels)` and
  `day02.is_safe_with_dampener(levels)` check a single report.
- `day03.parse(text, with_toggles=False)` returns a list of `Mul`
  instructions (with `a`, `b` and `product`), and with `with_toggles=True`
  also `Toggle.DO` and `Toggle.DONT` for `do()` and `don't()`.
- `day04.Grid(text)` wraps the word search and has `count_xmas()` and
  `count_x_mas()`. It raises `ValueError` if the text has no newline.

`aocsolve.cli.solve(day, part, text)` dispatches to the right solver and
raises `ValueError` for a day without a solution or a part other than 1
or 2.

## What it does not do

Only days 1 to 4 are solved. The package does not submit answers and does
not download puzzle descriptions; the fetcher only downloads the input text
for 2024.