#!/usr/bin/env python3
"""CLI entry point: parse a pasted Wordle share and print its spawn schedule.

The share is read from a file, or from stdin when no path (or ``-``) is given.
"""

from __future__ import annotations

import argparse
import sys

from models import WordleGrid, WordleParseError
from stack_planner import SpawnStep


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Parse a Wordle share into a stacking/animation plan."
    )
    p.add_argument("input", nargs="?", default="-",
                   help="Text file with the pasted share (default: stdin)")
    p.add_argument("--xlsx", default=None,
                   help="Also write the plan to this XLSX file")
    p.add_argument("--all", action="store_true",
                   help="Include cells that are not drawn")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    from paste_reader import read_share
    from grid_parser import parse_share
    from stack_planner import plan_stack

    try:
        grid = parse_share(read_share(args.input))
    except WordleParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    steps = plan_stack(grid, include_hidden=args.all)
    _print_summary(grid, steps)
    _print_plan(steps)

    if args.xlsx:
        from xlsx_writer import write_plan_xlsx

        write_plan_xlsx(grid, steps, args.xlsx)
        print(f"Output: {args.xlsx}", file=sys.stderr)


def _print_summary(grid: WordleGrid, steps: list[SpawnStep]) -> None:
    label = f"Wordle {grid.number}" if grid.number is not None else "Wordle"
    supports = sum(g.support for row in grid.rows for g in row)
    toppers = sum(g.topper for row in grid.rows for g in row)
    print(
        f"{label}: {grid.num_rows}x{grid.num_cols} grid, "
        f"{len(steps)} steps, {supports} supports, {toppers} toppers",
        file=sys.stderr,
    )


def _print_plan(steps: list[SpawnStep]) -> None:
    for step in steps:
        x, y, z = step.position
        print(
            f"{step.order:3d}  ({step.row},{step.col})  "
            f"{step.asset or '-':<6}  "
            f"x={x:7.3f} y={y:7.3f} z={z:5.2f}  t={step.delay:.2f}s"
        )


if __name__ == "__main__":
    main()
