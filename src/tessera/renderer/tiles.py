"""Tile glyphs and the 3x3 board layout for the sliding puzzle.

Each tile is drawn as three ``table_row`` strips of pips (``|X| |X|``)
stacked on top of each other.  The board decorates the middle column with
``:`` side borders and the first two rows with a ``+`` bottom border, then
lays the nine tiles out column by column.
"""
from __future__ import annotations

from typing import Dict, Sequence, Tuple

from ..errors import InvalidArgumentError
from ..picture import TOP, Picture, spread, stack, table_row
from ..plist import from_iterable, transpose

PIP = "X"
BLANK = " "
SIDE_BORDER = ":"
ROW_BORDER = "+"

BOARD_SIZE = 3
SOLVED_TILES: Tuple[str, ...] = ("1", "2", "3", "4", "5", "6", "7", "8", BLANK)

# three rows of three cells; "X" is a pip
_PATTERNS: Dict[str, Tuple[str, str, str]] = {
    "1": ("   ", " X ", "   "),
    "2": ("   ", "X X", "   "),
    "3": ("X  ", " X ", "  X"),
    "4": ("X X", "   ", "X X"),
    "5": ("X X", " X ", "X X"),
    "6": ("X X", "X X", "X X"),
    "7": ("XXX", " X ", "XXX"),
    "8": ("XXX", "X X", "XXX"),
}
_BLANK_PATTERN = ("   ", "   ", "   ")


def _pip_row(cells: str) -> Picture:
    return table_row([Picture(cell) for cell in cells], TOP)


def tile_picture(label: str) -> Picture:
    """The glyph for ``label``; anything unknown draws the blank tile."""
    top, middle, bottom = _PATTERNS.get(label, _BLANK_PATTERN)
    return _pip_row(top).above(_pip_row(middle).above(_pip_row(bottom), TOP), TOP)


def _decorated(index: int, label: str) -> Picture:
    picture = tile_picture(label)
    if index % BOARD_SIZE == 1:
        picture = picture.left_border(SIDE_BORDER).right_border(SIDE_BORDER)
    if index < BOARD_SIZE * (BOARD_SIZE - 1):
        picture = picture.bottom_border(ROW_BORDER)
    return picture


def board_picture(tiles: Sequence[str] = SOLVED_TILES) -> Picture:
    """Render nine tile labels (row-major) as the puzzle board."""
    if len(tiles) != BOARD_SIZE * BOARD_SIZE:
        raise InvalidArgumentError(f"board_picture: expected {BOARD_SIZE * BOARD_SIZE} tiles, got {len(tiles)}")
    pictures = from_iterable(_decorated(i, label) for i, label in enumerate(tiles))
    columns = transpose(pictures.group(BOARD_SIZE))
    return spread(columns.map(lambda column: stack(column, TOP)), TOP)


def parse_tiles(text: str) -> Tuple[str, ...]:
    """``"12345678_"`` -> tile labels; ``_`` (or a space) is the blank."""
    return tuple(BLANK if ch in "_ " else ch for ch in text)
