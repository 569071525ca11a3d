"""Day 1: comparing two lists of location IDs."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterator

_PAIR = re.compile(r"([0-9]+)[ \t]+([0-9]+)\n?")
_U32_MAX = 2**32 - 1


def _pairs(text: str) -> Iterator[tuple[int, int]]:
    """Yield leading number pairs, stopping at the first line that is not one."""
    pos = 0
    while (match := _PAIR.match(text, pos)) is not None:
        left, right = int(match[1]), int(match[2])
        if left > _U32_MAX or right > _U32_MAX:
            return
        yield left, right
        pos = match.end()


def parse(text: str) -> tuple[list[int], list[int]]:
    """Split the input into its left and right columns.

    Raises ValueError when the input does not start with a pair of numbers.
    """
    pairs = list(_pairs(text))
    if not pairs:
        raise ValueError("parse failed: expected lines of two numbers")
    left = [a for a, _ in pairs]
    right = [b for _, b in pairs]
    return left, right


def part1(text: str) -> str:
    """Total distance between the sorted columns."""
    left, right = parse(text)
    total = sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))
    return str(total)


def part2(text: str) -> str:
    """Similarity score: each left number times its count in the right column."""
    left, right = parse(text)
    counts = Counter(right)
    return str(sum(number * counts[number] for number in left))