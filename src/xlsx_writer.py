"""Write a spawn schedule to an XLSX file."""

from __future__ import annotations

import openpyxl
from openpyxl.styles import Font

from models import GuessKind, WordleGrid
from paste_reader import BLACK, GREEN, YELLOW
from stack_planner import SpawnStep

PLAN_HEADERS = [
    "Order", "Row", "Column", "Kind", "Asset",
    "X", "Y", "Z", "Delay", "Support", "Topper",
]

_KIND_GLYPHS = {
    GuessKind.CORRECT: GREEN,
    GuessKind.IN_WORD: YELLOW,
    GuessKind.NOT_IN_WORD: BLACK,
}


def write_plan_xlsx(
    grid: WordleGrid,
    steps: list[SpawnStep],
    output_path: str,
) -> None:
    """Write *steps* to a "Plan" sheet and the grid itself to a "Grid" sheet.

    The Grid sheet lists rows top first, in paste order, one glyph per cell.
    Glyphs are redrawn from each guess kind (⬛ / 🟩 / 🟨), so white and
    high-contrast squares come out in the standard colours. When the puzzle
    number is known it goes in A1 above the grid.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Plan"

    header_font = Font(bold=True, size=12)
    for col, title in enumerate(PLAN_HEADERS, start=1):
        ws.cell(row=1, column=col, value=title).font = header_font

    for i, step in enumerate(steps, start=2):
        guess = grid.cell(step.row, step.col)
        x, y, z = step.position
        values = [
            step.order, step.row, step.col, step.kind.value, step.asset,
            x, y, z, step.delay, guess.support, guess.topper,
        ]
        for col, value in enumerate(values, start=1):
            ws.cell(row=i, column=col, value=value)

    ws.column_dimensions["D"].width = 14

    ws2 = wb.create_sheet(title="Grid")
    row = 1
    if grid.number is not None:
        ws2.cell(row=row, column=1, value=f"Wordle {grid.number}").font = header_font
        row += 1
    for guesses in reversed(grid.rows):
        for col, guess in enumerate(guesses, start=1):
            ws2.cell(row=row, column=col, value=_KIND_GLYPHS[guess.kind])
        row += 1

    wb.save(output_path)
