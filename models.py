"""Data models for the wordle stack parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class GuessKind(Enum):
    CORRECT = "CORRECT"
    IN_WORD = "IN_WORD"
    NOT_IN_WORD = "NOT_IN_WORD"


@dataclass
class Guess:
    """The result of one letter guess at one position."""

    kind: GuessKind = GuessKind.NOT_IN_WORD
    # Holds up a CORRECT/IN_WORD guess stacked above it in the same column.
    support: bool = False
    # Shown so a row of misses is not rendered as an empty scene.
    topper: bool = False

    @property
    def visible(self) -> bool:
        return self.kind != GuessKind.NOT_IN_WORD or self.support or self.topper


@dataclass
class WordleGrid:
    """Parsed share grid. ``rows[0]`` is the last line of the pasted text."""

    number: int | None = None
    rows: list[list[Guess]] = field(default_factory=list)

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @property
    def num_cols(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def cell(self, row: int, col: int) -> Guess:
        return self.rows[row][col]


class WordleParseError(Exception):
    """Share text could not be turned into a grid."""


class InvalidFormatError(WordleParseError):
    """Ragged rows, or no grid rows at all."""


class InvalidCharacterError(WordleParseError):
    """A glyph passed the line filter but has no guess kind."""
