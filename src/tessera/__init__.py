"""Tessera: persistent lists and a composable text-picture algebra.

``tessera.plist`` provides immutable cons lists with Haskell-style
combinators; ``tessera.picture`` builds rectangular character pictures on
top of them that can be stacked, spread, padded, clipped, reflected, rotated,
bordered and assembled into tables.
"""
from __future__ import annotations

from .errors import (
    EmptyCollectionError,
    EmptyListError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    TesseraError,
    UnsupportedOperationError,
)
from .picture import (
    BOT,
    CTR,
    LFT,
    MID,
    RGT,
    TOP,
    Picture,
    box,
    empty_picture,
    max_depth,
    max_width,
    normalise_col,
    normalise_row,
    spread,
    stack,
    table_col,
    table_row,
)
from .plist import PList, cons, empty_list, explode, from_iterable, implode, single, transpose

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "TesseraError",
    "EmptyListError",
    "UnsupportedOperationError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "EmptyCollectionError",
    "PList",
    "cons",
    "empty_list",
    "single",
    "from_iterable",
    "explode",
    "implode",
    "transpose",
    "Picture",
    "TOP",
    "MID",
    "BOT",
    "LFT",
    "CTR",
    "RGT",
    "box",
    "empty_picture",
    "stack",
    "spread",
    "max_width",
    "max_depth",
    "normalise_col",
    "normalise_row",
    "table_col",
    "table_row",
]
