"""Run a day's solution on its input file and print the answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from aocsolve import day01, day02, day03, day04

_SOLVERS: dict[int, tuple[Callable[[str], str], Callable[[str], str]]] = {
    1: (day01.part1, day01.part2),
    2: (day02.part1, day02.part2),
    3: (day03.part1, day03.part2),
    4: (day04.part1, day04.part2),
}


def solve(day: int, part: int, text: str) -> str:
    """Answer for the given day and part (1 or 2)."""
    try:
        parts = _SOLVERS[day]
    except KeyError:
        raise ValueError(f"no solution for day {day}") from None
    if part not in (1, 2):
        raise ValueError(f"part must be 1 or 2, not {part}")
    return parts[part - 1](text)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve a puzzle day.")
    parser.add_argument("day", type=int, choices=sorted(_SOLVERS))
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument(
        "--input",
        type=Path,
        help="input file (default: day-NN/inputP.txt)",
    )
    args = parser.parse_args(argv)
    path = args.input or Path(f"day-{args.day:02d}") / f"input{args.part}.txt"
    text = path.read_text()
    try:
        result = solve(args.day, args.part, text)
    except ValueError as exc:
        print(f"Error: process part {args.part}: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())