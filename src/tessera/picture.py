"""Rectangular text pictures built on persistent lists.

A :class:`Picture` is an immutable block of characters stored as a list of
rows, each row a list of single-character strings.  Rows are left justified
with spaces when the picture is built, so every row is exactly ``width``
characters long.  A picture with no rows or no columns is empty and is the
identity element of every composition operator.

Composition operators take a ``position`` percentage (0..100, clamped) that
says how much of any padding or clipping goes on the leading side: the left
for width adjustments, the top for depth adjustments.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Union

from .errors import EmptyCollectionError, InvalidArgumentError
from .plist import EMPTY, PList, explode, from_iterable, implode, repeat, transpose as transpose_rows

logger = logging.getLogger(__name__)

TOP, MID, BOT = 0, 50, 100
LFT, CTR, RGT = 0, 50, 100

SPACE = " "
HORIZ = "-"
VERT = "|"

Rows = PList[PList[str]]
PictureSource = Union[str, PList, Iterable]


def _clamp_position(position: int) -> int:
    clamped = min(max(int(position), 0), 100)
    if clamped != position:
        logger.debug("position %r clamped to %d", position, clamped)
    return clamped


def _left_justify(line: PList[str], width: int) -> PList[str]:
    n = width - line.length()
    if n <= 0:
        return line
    return line.append(repeat(n, SPACE))


def _as_row(row) -> PList[str]:
    if isinstance(row, PList):
        return row
    if isinstance(row, str):
        return explode(row)
    return from_iterable(row)


def _split_lines(source: str) -> list[str]:
    lines = source.split("\n")
    while lines and not lines[-1]:
        lines.pop()
    return lines


def string_to_list_of_characters(s: str) -> PList[str]:
    return explode(s)


class Picture:
    """An immutable rectangle of characters.

    ``Picture("ab\\ncd")`` splits a string on ``\\n`` only and drops trailing
    empty lines; ``Picture(rows)`` accepts a list of rows, where each row is a
    ``PList`` of characters, a string or any iterable of characters.
    """

    __slots__ = ("_text", "_depth", "_width")

    def __init__(self, source: PictureSource = "") -> None:
        if isinstance(source, str):
            lines = from_iterable(explode(line) for line in _split_lines(source))
        elif isinstance(source, PList):
            lines = source if source.all(lambda row: isinstance(row, PList)) else source.map(_as_row)
        else:
            lines = from_iterable(_as_row(row) for row in source)

        lengths = lines.map(PList.length)
        width = lengths.foldr(max, 0)
        self._depth = lines.length()
        self._width = width
        # rows already at full width are kept as they are (and stay shared)
        if lengths.all(lambda n: n == width):
            self._text: Rows = lines
        else:
            self._text = lines.map(lambda line: _left_justify(line, width))

    @classmethod
    def from_string(cls, string: str) -> "Picture":
        return cls(string)

    @classmethod
    def from_lines(cls, lines: Iterable) -> "Picture":
        return cls(lines)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    @property
    def depth(self) -> int:
        return self._depth

    @property
    def width(self) -> int:
        return self._width

    def is_empty(self) -> bool:
        return self._depth == 0 or self._width == 0

    def lines(self) -> Rows:
        return self._text

    def rows(self) -> list[str]:
        return [row_to_string(line) for line in self._text]

    def render(self) -> str:
        return "\n".join(self.rows())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Picture({self.render()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Picture):
            return NotImplemented
        if self.is_empty() or other.is_empty():
            return self.is_empty() and other.is_empty()
        return self._text == other._text

    def __hash__(self) -> int:
        if self.is_empty():
            return hash(("Picture", ()))
        return hash(("Picture", self._text))

    def map(self, f: Callable[[str], str]) -> "Picture":
        """Apply ``f`` to every character."""
        return Picture(self._text.map(lambda line: line.map(f)))

    # ------------------------------------------------------------------
    # Aligned composition
    # ------------------------------------------------------------------
    def above_aligned(self, that: "Picture") -> "Picture":
        """``self`` on top of ``that``; widths are assumed equal."""
        if self.is_empty():
            return that
        if that.is_empty():
            return self
        return Picture(self._text.append(that._text))

    def beside_aligned(self, that: "Picture") -> "Picture":
        """``self`` to the left of ``that``; depths are assumed equal."""
        if self.is_empty():
            return that
        if that.is_empty():
            return self
        return Picture(self._text.zip_with(that._text, PList.append))

    # ------------------------------------------------------------------
    # Padding and clipping
    # ------------------------------------------------------------------
    def fix_width(self, width: int, position: int, fill: str = SPACE) -> "Picture":
        """Pad or clip to exactly ``width`` columns.

        ``position`` percent of the padding (or of the clipped columns) goes
        on the left, the remainder on the right.
        """
        pos = _clamp_position(position)
        length = abs(width - self._width)
        left_width = length * pos // 100
        right_width = length - left_width
        if width < 1:
            return empty_picture()
        if width > self._width:
            return (box(self._depth, left_width, fill)
                    .beside_aligned(self)
                    .beside_aligned(box(self._depth, right_width, fill)))
        if length:
            logger.debug("clipping %d columns (%d left, %d right)", length, left_width, right_width)
        return Picture(self._text.map(lambda line: line.take(width + left_width).drop(left_width)))

    def fix_depth(self, depth: int, position: int, fill: str = SPACE) -> "Picture":
        """Pad or clip to exactly ``depth`` rows, ``position`` percent at the top."""
        pos = _clamp_position(position)
        length = abs(depth - self._depth)
        top_depth = length * pos // 100
        bot_depth = length - top_depth
        if depth < 1:
            return empty_picture()
        if depth > self._depth:
            return (box(top_depth, self._width, fill)
                    .above_aligned(self)
                    .above_aligned(box(bot_depth, self._width, fill)))
        if length:
            logger.debug("clipping %d rows (%d top, %d bottom)", length, top_depth, bot_depth)
        return Picture(self._text.take(depth + top_depth).drop(top_depth))

    # ------------------------------------------------------------------
    # General composition
    # ------------------------------------------------------------------
    def above(self, that: "Picture", position: int = LFT, fill: str = SPACE) -> "Picture":
        """``self`` on top of ``that``, padding the narrower one."""
        if self.is_empty():
            return that
        if that.is_empty():
            return self
        if self._width < that._width:
            return self.fix_width(that._width, position, fill).above_aligned(that)
        return self.above_aligned(that.fix_width(self._width, position, fill))

    def beside(self, that: "Picture", position: int = TOP, fill: str = SPACE) -> "Picture":
        """``self`` to the left of ``that``, padding the shallower one."""
        if self.is_empty():
            return that
        if that.is_empty():
            return self
        if self._depth < that._depth:
            return self.fix_depth(that._depth, position, fill).beside_aligned(that)
        return self.beside_aligned(that.fix_depth(self._depth, position, fill))

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def transpose(self) -> "Picture":
        return Picture(transpose_rows(self._text))

    def reflect_horizontal(self) -> "Picture":
        """Mirror about the horizontal axis (row order reversed)."""
        return Picture(self._text.reverse())

    def reflect_vertical(self) -> "Picture":
        """Mirror about the vertical axis (each row reversed)."""
        return Picture(self._text.map(PList.reverse))

    def rotate(self, quadrants: int) -> "Picture":
        """Rotate clockwise by ``quadrants`` quarter turns."""
        turns = quadrants % 4
        if turns == 1:
            return self.transpose().reflect_vertical()
        if turns == 2:
            return self.reflect_horizontal().reflect_vertical()
        if turns == 3:
            return self.transpose().reflect_horizontal()
        return self

    # ------------------------------------------------------------------
    # Borders and frames
    # ------------------------------------------------------------------
    def left_border(self, fill: str) -> "Picture":
        return box(self._depth, 1, fill).beside(self, TOP)

    def right_border(self, fill: str) -> "Picture":
        return self.beside(box(self._depth, 1, fill), TOP)

    def top_border(self, fill: str) -> "Picture":
        return box(1, self._width, fill).above(self, LFT)

    def bottom_border(self, fill: str) -> "Picture":
        return self.above(box(1, self._width, fill), LFT)

    def border(self, fill: str) -> "Picture":
        return self.top_border(fill).bottom_border(fill).left_border(fill).right_border(fill)

    def left_frame(self) -> "Picture":
        return self.left_border(VERT)

    def right_frame(self) -> "Picture":
        return self.right_border(VERT)

    def top_frame(self) -> "Picture":
        return self.top_border(HORIZ)

    def bottom_frame(self) -> "Picture":
        return self.bottom_border(HORIZ)

    def frame(self) -> "Picture":
        return self.left_frame().right_frame().top_frame().bottom_frame()


def row_to_string(line: PList[str]) -> str:
    return implode(line)


def empty_picture() -> Picture:
    return Picture(EMPTY)


def empty_picture_list() -> PList[Picture]:
    return EMPTY


def box(depth: int, width: int, fill: str) -> Picture:
    """A ``depth`` x ``width`` rectangle of ``fill``."""
    if depth <= 0 or width <= 0:
        return empty_picture()
    if len(fill) != 1:
        raise InvalidArgumentError(f"box: fill must be a single character, got {fill!r}")
    return Picture(repeat(depth, repeat(width, fill)))


def _as_pictures(pictures: Iterable[Picture]) -> PList[Picture]:
    if isinstance(pictures, PList):
        return pictures
    return from_iterable(pictures)


# ----------------------------------------------------------------------
# Aggregates
# ----------------------------------------------------------------------

def stack(pictures: Iterable[Picture], position: int = LFT, fill: str = SPACE) -> Picture:
    """Pictures one above the other, the first on top."""
    return _as_pictures(pictures).foldr(lambda p, q: p.above(q, position, fill), empty_picture())


def spread(pictures: Iterable[Picture], position: int = TOP, fill: str = SPACE) -> Picture:
    """Pictures side by side, the first on the left."""
    return _as_pictures(pictures).foldr(lambda p, q: p.beside(q, position, fill), empty_picture())


def max_width(pictures: Iterable[Picture]) -> int:
    pictures = _as_pictures(pictures)
    if pictures.is_empty():
        raise EmptyCollectionError("max_width: no pictures")
    return pictures.map(lambda p: p.width).foldl1(max)


def max_depth(pictures: Iterable[Picture]) -> int:
    pictures = _as_pictures(pictures)
    if pictures.is_empty():
        raise EmptyCollectionError("max_depth: no pictures")
    return pictures.map(lambda p: p.depth).foldl1(max)


def normalise_col(pictures: Iterable[Picture], position: int = LFT, fill: str = SPACE) -> PList[Picture]:
    """Every picture padded (or clipped) to the widest width."""
    pictures = _as_pictures(pictures)
    width = max_width(pictures)
    return pictures.map(lambda p: p.fix_width(width, position, fill))


def normalise_row(pictures: Iterable[Picture], position: int = TOP, fill: str = SPACE) -> PList[Picture]:
    """Every picture padded (or clipped) to the deepest depth."""
    pictures = _as_pictures(pictures)
    depth = max_depth(pictures)
    return pictures.map(lambda p: p.fix_depth(depth, position, fill))


def table_col(pictures: Iterable[Picture], position: int = LFT, fill: str = SPACE) -> Picture:
    """Cells stacked vertically with a rule between each and around the ends."""
    cells = normalise_col(pictures, position, fill).map(Picture.top_frame)
    return stack(cells, position, fill).bottom_frame()


def table_row(pictures: Iterable[Picture], position: int = TOP, fill: str = SPACE) -> Picture:
    """Cells spread horizontally, ``|p1|p2|...|pk|``."""
    cells = normalise_row(pictures, position, fill).map(Picture.left_frame)
    return spread(cells, position, fill).right_frame()


Picture.empty = staticmethod(empty_picture)
Picture.box = staticmethod(box)
Picture.stack = staticmethod(stack)
Picture.spread = staticmethod(spread)
Picture.max_width = staticmethod(max_width)
Picture.max_depth = staticmethod(max_depth)
Picture.normalise_col = staticmethod(normalise_col)
Picture.normalise_row = staticmethod(normalise_row)
Picture.table_col = staticmethod(table_col)
Picture.table_row = staticmethod(table_row)


__all__ = [
    "Picture",
    "TOP",
    "MID",
    "BOT",
    "LFT",
    "CTR",
    "RGT",
    "SPACE",
    "HORIZ",
    "VERT",
    "box",
    "empty_picture",
    "empty_picture_list",
    "string_to_list_of_characters",
    "row_to_string",
    "stack",
    "spread",
    "max_width",
    "max_depth",
    "normalise_col",
    "normalise_row",
    "table_col",
    "table_row",
]
