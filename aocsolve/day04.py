"""Day 4: word search for XMAS and X-shaped MAS."""

from __future__ import annotations

_DIRECTIONS = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
)
_DIAGONAL_PAIRS = (((-1, -1), (1, 1)), ((-1, 1), (1, -1)))


class Grid:
    """A block of text addressed by character offset, one row per line."""

    def __init__(self, text: str) -> None:
        newline = text.find("\n")
        if newline < 0:
            raise ValueError("grid must contain at least one newline")
        self.text = text
        # Each row spans its characters plus the trailing newline.
        self.line_len = newline + 1

    def __repr__(self) -> str:
        return f"Grid(text='...', line_len={self.line_len})"

    def _neighbour(self, idx: int, delta_row: int, delta_col: int) -> int | None:
        row, col = divmod(idx, self.line_len)
        new_row, new_col = row + delta_row, col + delta_col
        if new_row < 0 or new_col < 0 or new_col >= self.line_len - 1:
            return None
        new_idx = new_row * self.line_len + new_col
        return new_idx if new_idx < len(self.text) else None

    def _spells(self, idx: int, delta_row: int, delta_col: int, word: str) -> bool:
        for expected in word:
            next_idx = self._neighbour(idx, delta_row, delta_col)
            if next_idx is None or self.text[next_idx] != expected:
                return False
            idx = next_idx
        return True

    def _is_x_mas(self, idx: int) -> bool:
        for first, second in _DIAGONAL_PAIRS:
            a = self._neighbour(idx, *first)
            b = self._neighbour(idx, *second)
            if a is None or b is None:
                return False
            if {self.text[a], self.text[b]} != {"M", "S"}:
                return False
        return True

    def count_xmas(self) -> int:
        """Occurrences of XMAS in any of the eight directions."""
        return sum(
            self._spells(idx, delta_row, delta_col, "MAS")
            for idx, ch in enumerate(self.text)
            if ch == "X"
            for delta_row, delta_col in _DIRECTIONS
        )

    def count_x_mas(self) -> int:
        """Occurrences of two MAS words crossing diagonally on an A."""
        return sum(
            1 for idx, ch in enumerate(self.text) if ch == "A" and self._is_x_mas(idx)
        )


def part1(text: str) -> str:
    """Number of XMAS words in the grid."""
    return str(Grid(text).count_xmas())


def part2(text: str) -> str:
    """Number of X-MAS crosses in the grid."""
    return str(Grid(text).count_x_mas())