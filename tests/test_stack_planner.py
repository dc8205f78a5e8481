"""Tests for stack_planner.py."""

import pytest

from models import GuessKind
from grid_parser import parse_share
from stack_planner import (
    CUBE_SIZE,
    NEXT_ROW_DELAY,
    ROW_STEP_DELAY,
    StackScene,
    cell_position,
    plan_stack,
)

EXAMPLE_SHARE = """Wordle 218 3/6
⬛⬛⬛⬛⬛
⬛🟩⬛⬛🟨
🟨🟩⬛⬛⬛
🟩🟩🟩🟩🟩"""


class TestPlanStack:
    def test_full_plan_covers_grid(self):
        grid = parse_share(EXAMPLE_SHARE)
        steps = plan_stack(grid, include_hidden=True)
        assert len(steps) == 20
        assert [s.order for s in steps] == list(range(20))

    def test_visible_steps(self):
        grid = parse_share(EXAMPLE_SHARE)
        steps = plan_stack(grid)
        assert [(s.row, s.col) for s in steps] == [
            (0, 0), (0, 1), (0, 2), (0, 3), (0, 4),
            (1, 4), (1, 1), (1, 0),
            (2, 1), (2, 4),
            (3, 4), (3, 1),
        ]

    def test_assets(self):
        grid = parse_share(EXAMPLE_SHARE)
        assets = {(s.row, s.col): s.asset for s in plan_stack(grid)}
        assert assets[(0, 0)] == "green"
        assert assets[(1, 0)] == "yellow"
        assert assets[(1, 4)] == "black"  # support
        assert assets[(3, 1)] == "black"  # topper

    def test_hidden_steps_have_no_asset(self):
        grid = parse_share(EXAMPLE_SHARE)
        hidden = [s for s in plan_stack(grid, include_hidden=True) if s.asset is None]
        assert len(hidden) == 8
        assert all(s.kind == GuessKind.NOT_IN_WORD for s in hidden)

    def test_delays_accumulate(self):
        grid = parse_share(EXAMPLE_SHARE)
        steps = plan_stack(grid, include_hidden=True)
        assert steps[0].delay == 0.0
        assert steps[4].delay == pytest.approx(4 * ROW_STEP_DELAY)
        assert steps[5].delay == pytest.approx(4 * ROW_STEP_DELAY + NEXT_ROW_DELAY)
        assert steps[19].delay == pytest.approx(16 * ROW_STEP_DELAY + 3 * NEXT_ROW_DELAY)

    def test_delays_monotonic(self):
        grid = parse_share(EXAMPLE_SHARE)
        delays = [s.delay for s in plan_stack(grid, include_hidden=True)]
        assert delays == sorted(delays)
        assert len(set(delays)) == len(delays)

    def test_filtering_keeps_timing(self):
        grid = parse_share(EXAMPLE_SHARE)
        full = {s.order: s.delay for s in plan_stack(grid, include_hidden=True)}
        for step in plan_stack(grid):
            assert step.delay == full[step.order]

    def test_positions(self):
        grid = parse_share(EXAMPLE_SHARE)
        steps = {(s.row, s.col): s for s in plan_stack(grid)}
        assert steps[(0, 0)].position == pytest.approx((-2.5 * CUBE_SIZE[0], 0.0, 0.0))
        assert steps[(3, 4)].position == pytest.approx((1.5 * CUBE_SIZE[0], 3 * CUBE_SIZE[1], 0.0))


class TestCellPosition:
    def test_row_spans_origin(self):
        # Boxes extend one width to +x from their position.
        left = cell_position(0, 0, 4)[0]
        right = cell_position(0, 3, 4)[0] + CUBE_SIZE[0]
        assert left == pytest.approx(-right)

    def test_rows_stack_up(self):
        assert cell_position(2, 0, 5)[1] == pytest.approx(2 * CUBE_SIZE[1])


class TestStackScene:
    def test_starts_empty(self):
        scene = StackScene()
        assert scene.grid is None
        assert scene.plan == []

    def test_update_installs_grid(self):
        scene = StackScene()
        assert scene.update(EXAMPLE_SHARE) is True
        assert scene.grid.number == 218
        assert len(scene.plan) == 12

    def test_failed_update_keeps_previous(self):
        scene = StackScene()
        scene.update(EXAMPLE_SHARE)
        grid, plan = scene.grid, scene.plan
        assert scene.update("just some chat") is False
        assert scene.grid is grid
        assert scene.plan is plan

    def test_failed_first_update(self):
        scene = StackScene()
        assert scene.update("⬛⬛\n⬛⬛⬛") is False
        assert scene.grid is None

    def test_new_paste_replaces_everything(self):
        scene = StackScene()
        scene.update(EXAMPLE_SHARE)
        assert scene.update("Wordle 7 1/6\n🟩🟩🟩") is True
        assert scene.grid.number == 7
        assert [(s.row, s.col) for s in scene.plan] == [(0, 0), (0, 1), (0, 2)]
