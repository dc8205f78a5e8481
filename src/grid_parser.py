"""Parse pasted share text into an annotated WordleGrid."""

from __future__ import annotations

import re

from annotator import annotate
from models import (
    Guess,
    GuessKind,
    InvalidCharacterError,
    InvalidFormatError,
    WordleGrid,
)
from paste_reader import GLYPH_KINDS, is_canonical_line, normalize_share

HEADER_KEYWORD = "Wordle"

_NUMBER_RE = re.compile(r"[0-9]+")

# Puzzle numbers are 32-bit unsigned; anything larger is not a puzzle number.
MAX_PUZZLE_NUMBER = 2**32 - 1


def parse_share(text: str) -> WordleGrid:
    """Build the grid bottom-up from *text*, then run the annotation passes.

    The last pasted line becomes row 0. Lines containing anything other than
    grid glyphs (titles, captions, hashtags) are skipped. Raises
    InvalidFormatError on ragged rows or when no grid rows are found.
    """
    text = normalize_share(text)

    rows: list[list[Guess]] = []
    number: int | None = None
    width: int | None = None

    # Lines end at "\n" only; one trailing "\r" is dropped.
    lines = [line.removesuffix("\r") for line in text.split("\n")]

    for line in reversed(lines):
        if line.startswith(HEADER_KEYWORD):
            parsed = _parse_number(line)
            if parsed is not None:
                number = parsed

        if not line:
            continue

        if not is_canonical_line(line):
            continue

        if width is not None and len(line) != width:
            raise InvalidFormatError(
                f"Row width {len(line)} does not match previous rows ({width})"
            )
        width = len(line)

        rows.append([Guess(kind=_guess_kind(c)) for c in line])

    if not rows:
        raise InvalidFormatError("No grid rows found")

    return annotate(WordleGrid(number=number, rows=rows))


def _parse_number(line: str) -> int | None:
    """Second space-separated token of a header line, if it is an integer."""
    tokens = line.split(" ")
    if len(tokens) < 2 or not _NUMBER_RE.fullmatch(tokens[1]):
        return None
    number = int(tokens[1])
    return number if number <= MAX_PUZZLE_NUMBER else None


def _guess_kind(glyph: str) -> GuessKind:
    try:
        return GLYPH_KINDS[glyph]
    except KeyError:
        raise InvalidCharacterError(f"No guess kind for {glyph!r}") from None
