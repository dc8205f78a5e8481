"""Annotation passes run over a freshly parsed grid."""

from __future__ import annotations

from models import GuessKind, WordleGrid


def annotate(grid: WordleGrid) -> WordleGrid:
    mark_supports(grid)
    mark_toppers(grid)
    return grid


def mark_supports(grid: WordleGrid) -> None:
    """Flag misses that sit under a CORRECT/IN_WORD guess in the same column.

    Boxes are stacked from row 0 upward, so every miss below the highest hit
    of a column has to be drawn to keep that hit from floating.
    """
    for c in range(grid.num_cols):
        needs_support = False
        for row in reversed(grid.rows):
            guess = row[c]
            if guess.kind != GuessKind.NOT_IN_WORD:
                needs_support = True
            elif needs_support:
                guess.support = True


def mark_toppers(grid: WordleGrid) -> None:
    """Make a top row of misses visible.

    Only applies when the last row is all NOT_IN_WORD. Each column's wrong
    streak is counted from the last row toward row 0; the columns with the
    shortest streak get every miss in that streak flagged as a topper.
    """
    if not grid.rows:
        return
    if any(g.kind != GuessKind.NOT_IN_WORD for g in grid.rows[-1]):
        return

    depths = [_wrong_streak(grid, c) for c in range(grid.num_cols)]
    shallowest = min(depths)

    for c, depth in enumerate(depths):
        if depth != shallowest:
            continue
        for r in range(grid.num_rows - 1, grid.num_rows - 1 - depth, -1):
            grid.rows[r][c].topper = True


def _wrong_streak(grid: WordleGrid, col: int) -> int:
    """Consecutive misses in *col*, counted down from the last row."""
    depth = 0
    for r in range(grid.num_rows - 1, -1, -1):
        if grid.rows[r][col].kind != GuessKind.NOT_IN_WORD:
            break
        depth += 1
    return depth
