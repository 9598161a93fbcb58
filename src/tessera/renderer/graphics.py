"""Helpers for higher-level picture composition.

These sit on top of the picture algebra: layering several pictures into one
and framing a block of text.
"""
from __future__ import annotations

from typing import Iterable

from ..picture import LFT, SPACE, TOP, Picture, empty_picture, normalise_col, normalise_row
from ..plist import PList, from_iterable


def _overlay(under: str, over: str) -> str:
    return under if over == SPACE else over


def _overlay_rows(under: PList[str], over: PList[str]) -> PList[str]:
    return under.zip_with(over, _overlay)


def merge_layers(layers: Iterable[Picture]) -> Picture:
    """Merge pictures top-left aligned, preferring later non-space characters.

    Smaller layers are padded with spaces on the right and bottom, so the
    result is as wide as the widest layer and as deep as the deepest.
    """
    pictures = from_iterable(layers)
    if pictures.is_empty():
        return empty_picture()
    pictures = normalise_row(normalise_col(pictures, LFT), TOP)
    return pictures.foldl1(lambda under, over: Picture(under.lines().zip_with(over.lines(), _overlay_rows)))


def frame_text(text: str, *, padding: int = 1, fill: str = SPACE) -> Picture:
    """Frame ``text`` with ``|``/``-`` rules and ``padding`` columns each side."""
    picture = Picture(text)
    if padding > 0:
        picture = picture.fix_width(picture.width + padding * 2, 50, fill)
    return picture.frame()
