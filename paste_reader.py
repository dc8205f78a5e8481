"""Read pasted share text and rewrite third-party representations to glyphs."""

from __future__ import annotations

import sys
from pathlib import Path

from models import GuessKind, WordleParseError

BLACK = "\u2b1b"  # ⬛
WHITE = "\u2b1c"  # ⬜
GREEN = "\U0001f7e9"  # 🟩
YELLOW = "\U0001f7e8"  # 🟨
# High contrast mode
ORANGE = "\U0001f7e7"  # 🟧
BLUE = "\U0001f7e6"  # 🟦

GLYPH_KINDS: dict[str, GuessKind] = {
    BLACK: GuessKind.NOT_IN_WORD,
    WHITE: GuessKind.NOT_IN_WORD,
    GREEN: GuessKind.CORRECT,
    YELLOW: GuessKind.IN_WORD,
    ORANGE: GuessKind.CORRECT,
    BLUE: GuessKind.IN_WORD,
}

VALID_GLYPHS = frozenset(GLYPH_KINDS)

REPLACEMENTS: list[tuple[str, str]] = [
    # slack
    (":black_large_square:", BLACK),
    (":white_large_square:", BLACK),
    (":large_green_square:", GREEN),
    (":large_yellow_square:", YELLOW),
    (":large_orange_square:", ORANGE),
    (":large_blue_square:", BLUE),
    # twitter alt text
    ("Black large square", BLACK),
    ("White large square", BLACK),
    ("Green square", GREEN),
    ("Yellow square", YELLOW),
    ("Orange square", ORANGE),
    ("Blue square", BLUE),
]


def normalize_share(text: str) -> str:
    """Replace every known shortcode / alt-text phrase with its glyph."""
    for pattern, glyph in REPLACEMENTS:
        text = text.replace(pattern, glyph)
    return text


def is_canonical_line(line: str) -> bool:
    return bool(line) and all(c in VALID_GLYPHS for c in line)


def read_share(path: str | Path) -> str:
    """Return the share text at *path*; ``-`` reads stdin."""
    if str(path) == "-":
        return sys.stdin.read()

    path = Path(path)
    if not path.exists():
        raise WordleParseError(f"File not found: {path}")
    return path.read_text(encoding="utf-8")
