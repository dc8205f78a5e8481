"""Serpentine traversal of a WordleGrid, used to sequence the build animation."""

from __future__ import annotations

from models import Guess, WordleGrid


class SnakeIterator:
    """Yield ``(row, col, guess)`` from row 0, even rows L→R, odd rows R→L.

    The only state is a linear cursor, so a copy taken mid-traversal resumes
    independently of the original.
    """

    def __init__(self, grid: WordleGrid, index: int = 0):
        self.grid = grid
        self.index = index

    def __iter__(self) -> SnakeIterator:
        return self

    def __next__(self) -> tuple[int, int, Guess]:
        cols = self.grid.num_cols
        if cols == 0 or self.index >= self.grid.num_rows * cols:
            raise StopIteration

        row, offset = divmod(self.index, cols)
        col = offset if row % 2 == 0 else cols - 1 - offset
        self.index += 1
        return row, col, self.grid.rows[row][col]

    def __len__(self) -> int:
        return max(0, self.grid.num_rows * self.grid.num_cols - self.index)

    def copy(self) -> SnakeIterator:
        return SnakeIterator(self.grid, self.index)

    __copy__ = copy


def snake_iter(grid: WordleGrid) -> SnakeIterator:
    """Iterate from the bottom in a snake-like manner, initially left to right.

    678
    543
    012
    """
    return SnakeIterator(grid)
