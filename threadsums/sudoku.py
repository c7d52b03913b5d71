"""A 9x9 sudoku grid with a backtracking solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar


def _empty_grid() -> list[list[int]]:
    return [[0] * SudokuGrid.SIZE for _ in range(SudokuGrid.SIZE)]


@dataclass
class SudokuGrid:
    """A sudoku board; zero marks an empty cell."""

    SIZE: ClassVar[int] = 9
    BOX: ClassVar[int] = 3

    grid: list[list[int]] = field(default_factory=_empty_grid)

    @classmethod
    def from_string(cls, text: str) -> SudokuGrid:
        """Build a grid from 81 digits read row by row."""
        cell_count = cls.SIZE * cls.SIZE
        if len(text) != cell_count:
            raise ValueError(f"expected {cell_count} digits, got {len(text)}")
        if any(ch not in "0123456789" for ch in text):
            raise ValueError("grid text may hold only the digits 0-9")
        values = [int(ch) for ch in text]
        return cls([values[r : r + cls.SIZE] for r in range(0, cell_count, cls.SIZE)])

    def is_valid(self, row: int, col: int, val: int) -> bool:
        """Tell whether ``val`` may go at ``(row, col)`` without a clash."""
        if val in self.grid[row] or any(line[col] == val for line in self.grid):
            return False
        top = row - row % self.BOX
        left = col - col % self.BOX
        return not any(
            val in line[left : left + self.BOX] for line in self.grid[top : top + self.BOX]
        )

    def _first_empty(self) -> tuple[int, int] | None:
        return next(
            (
                (r, c)
                for r, line in enumerate(self.grid)
                for c, value in enumerate(line)
                if value == 0
            ),
            None,
        )

    def solve(self) -> bool:
        """Fill the empty cells in place; return False if no solution exists.

        On failure every cell filled during the search is cleared again.
        """
        empty = self._first_empty()
        if empty is None:
            return True
        row, col = empty
        for val in range(1, self.SIZE + 1):
            if self.is_valid(row, col, val):
                self.grid[row][col] = val
                if self.solve():
                    return True
                self.grid[row][col] = 0
        return False

    def __str__(self) -> str:
        return "\n".join("".join(f"{value} " for value in line) for line in self.grid)