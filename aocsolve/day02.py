"""Day 2: checking reactor reports for safety."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence

_LINE = re.compile(r"[0-9]+(?:[ \t]+[0-9]+)*\n?")
_NUMBER = re.compile(r"[0-9]+")
_U32_MAX = 2**32 - 1


def _reports(text: str) -> Iterator[list[int]]:
    """Yield leading report lines, stopping at the first that is not one."""
    pos = 0
    while (match := _LINE.match(text, pos)) is not None:
        levels = [int(n) for n in _NUMBER.findall(match.group())]
        if any(level > _U32_MAX for level in levels):
            return
        yield levels
        pos = match.end()


def parse(text: str) -> list[list[int]]:
    """Parse the input into a list of reports, each a list of levels.

    Raises ValueError when the input does not start with a report.
    """
    reports = list(_reports(text))
    if not reports:
        raise ValueError("Failed to parse input: expected lines of numbers")
    return reports


def is_safe(levels: Sequence[int]) -> bool:
    """A report is safe if it strictly increases or decreases by 1 to 3 each step."""
    increasing = decreasing = True
    for a, b in zip(levels, levels[1:]):
        if a == b or abs(a - b) > 3:
            return False
        if a < b:
            decreasing = False
        else:
            increasing = False
        if not (increasing or decreasing):
            return False
    return True


def is_safe_with_dampener(levels: Sequence[int]) -> bool:
    """Safe as is, or safe once any single level is removed."""
    if is_safe(levels):
        return True
    return any(
        is_safe([*levels[:i], *levels[i + 1 :]]) for i in range(len(levels))
    )


def part1(text: str) -> str:
    """Number of safe reports."""
    return str(sum(1 for report in parse(text) if is_safe(report)))


def part2(text: str) -> str:
    """Number of reports that are safe with the problem dampener."""
    return str(sum(1 for report in parse(text) if is_safe_with_dampener(report)))