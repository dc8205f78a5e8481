"""Turn a parsed grid into the spawn schedule consumed by the renderer."""

from __future__ import annotations

from dataclasses import dataclass

from grid_parser import parse_share
from models import GuessKind, WordleGrid, WordleParseError
from snake import snake_iter

# Box model dimensions (width, height, depth).
CUBE_SIZE = (2.15, 2.11, 2.23)

ROW_STEP_DELAY = 0.1  # seconds between neighbours on the same row
NEXT_ROW_DELAY = 0.3  # seconds when the snake turns onto the next row

ASSETS = {
    GuessKind.CORRECT: "green",
    GuessKind.IN_WORD: "yellow",
    GuessKind.NOT_IN_WORD: "black",
}


@dataclass(frozen=True)
class SpawnStep:
    """One cell of the grid, in snake order, with where and when to spawn it."""

    order: int
    row: int
    col: int
    kind: GuessKind
    asset: str | None  # None: nothing is drawn
    position: tuple[float, float, float]
    delay: float


def plan_stack(grid: WordleGrid, include_hidden: bool = False) -> list[SpawnStep]:
    """Walk *grid* in snake order and assign positions and start delays.

    Delays accumulate over the full ordering, so dropping hidden cells
    (the default) leaves the timing of the visible ones unchanged.
    """
    steps: list[SpawnStep] = []
    delay = 0.0
    prev_row: int | None = None

    for order, (row, col, guess) in enumerate(snake_iter(grid)):
        if prev_row is not None:
            delay += ROW_STEP_DELAY if row == prev_row else NEXT_ROW_DELAY
        prev_row = row

        asset = ASSETS[guess.kind] if guess.visible else None
        if asset is None and not include_hidden:
            continue

        steps.append(SpawnStep(
            order=order,
            row=row,
            col=col,
            kind=guess.kind,
            asset=asset,
            position=cell_position(row, col, grid.num_cols),
            delay=round(delay, 6),
        ))

    return steps


def cell_position(row: int, col: int, num_cols: int) -> tuple[float, float, float]:
    """Centre the columns on x=0; row 0 sits on the floor."""
    x = (col - num_cols / 2) * CUBE_SIZE[0]
    y = row * CUBE_SIZE[1]
    return (x, y, 0.0)


class StackScene:
    """Current grid and plan; a new paste replaces both or changes nothing."""

    def __init__(self) -> None:
        self.grid: WordleGrid | None = None
        self.plan: list[SpawnStep] = []

    def update(self, text: str) -> bool:
        """Parse *text* and install it. Returns False (keeping the old scene) on failure."""
        try:
            grid = parse_share(text)
        except WordleParseError:
            return False

        self.grid = grid
        self.plan = plan_stack(grid)
        return True
