"""Tessera renderer package.

Everything here is a consumer of the picture algebra: converting pictures to
printable text, layering and framing helpers, and the tile glyphs and board
layout used by the sliding puzzle front end.
"""
from __future__ import annotations

from .graphics import frame_text, merge_layers
from .painter import PicturePainter, print_picture, render
from .tiles import SOLVED_TILES, board_picture, parse_tiles, tile_picture

__all__ = [
    "PicturePainter",
    "print_picture",
    "render",
    "frame_text",
    "merge_layers",
    "SOLVED_TILES",
    "board_picture",
    "parse_tiles",
    "tile_picture",
]
