"""Turn pictures into printable text."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from rich.console import Console

from ..picture import Picture


def render(picture: Picture) -> str:
    """Rows joined by newlines, each row its characters in order."""
    return picture.render()


@dataclass
class PicturePainter:
    """Prints pictures to a rich console, verbatim.

    Markup, emoji codes and highlighting are all switched off so that a
    picture containing ``[`` or ``:`` comes out exactly as drawn.
    """

    console: Console = field(default_factory=Console)
    history: List[str] = field(default_factory=list)

    def paint(self, picture: Picture) -> str:
        text = render(picture)
        self.console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)
        self.history.append(text)
        return text


def print_picture(picture: Picture, console: Console | None = None) -> str:
    return PicturePainter(console or Console()).paint(picture)
