"""Day 3: summing multiplications from corrupted memory."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from functools import reduce

_U32_MAX = 2**32 - 1
_MUL_ONLY = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_WITH_TOGGLES = re.compile(r"mul\(([0-9]+),([0-9]+)\)|(do\(\))|(don't\(\))")


@dataclass(frozen=True)
class Mul:
    """A mul(a,b) instruction."""

    a: int
    b: int

    @property
    def product(self) -> int:
        return self.a * self.b


class Toggle(enum.Enum):
    """A do() or don't() instruction."""

    DO = "do()"
    DONT = "don't()"


def parse(text: str, with_toggles: bool = False) -> list[Mul | Toggle]:
    """Extract instructions from the text, skipping everything else."""
    pattern = _WITH_TOGGLES if with_toggles else _MUL_ONLY
    instructions: list[Mul | Toggle] = []
    for match in pattern.finditer(text):
        if match[1] is not None:
            a, b = int(match[1]), int(match[2])
            if a <= _U32_MAX and b <= _U32_MAX:
                instructions.append(Mul(a, b))
        elif match.lastindex == 3:
            instructions.append(Toggle.DO)
        else:
            instructions.append(Toggle.DONT)
    return instructions


def part1(text: str) -> str:
    """Sum of all mul products."""
    return str(sum(ins.product for ins in parse(text) if isinstance(ins, Mul)))


def part2(text: str) -> str:
    """Sum of mul products that are enabled by the latest do()/don't()."""

    def step(state: tuple[int, bool], ins: Mul | Toggle) -> tuple[int, bool]:
        total, enabled = state
        if isinstance(ins, Mul):
            return (total + ins.product, enabled) if enabled else state
        return total, ins is Toggle.DO

    total, _ = reduce(step, parse(text, with_toggles=True), (0, True))
    return str(total)