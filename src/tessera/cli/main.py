# ~/tessera/src/tessera/cli/main.py
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .. import __version__
from ..errors import TesseraError
from ..picture import CTR, TOP, Picture, box as box_picture, table_col, table_row
from ..renderer import PicturePainter, board_picture, parse_tiles
from ..renderer.tiles import SOLVED_TILES
from ..runtime import RenderOptions, apply_options, parse_file_flags, strip_file_flags

console = Console()
error_console = Console(stderr=True)
painter = PicturePainter(console)


def _configure_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )


def _fail(error):
    error_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    sys.exit(1)


def _single_char(ctx, param, value):
    if value is not None and len(value) != 1:
        raise click.BadParameter("must be a single character")
    return value


@click.group()
@click.version_option(version=__version__, prog_name="Tessera")
@click.option('-v', '--verbose', is_flag=True, help="Log debug messages")
def cli(verbose):
    """Tessera - compose and transform text pictures"""
    _configure_logging(verbose)


@cli.command()
@click.argument('file', type=click.File('r'))
@click.option('--rotate', type=int, default=None, help="Quarter turns clockwise")
@click.option('--reflect', type=click.Choice(['horizontal', 'vertical']), default=None)
@click.option('--transpose', is_flag=True, help="Swap rows and columns")
@click.option('--frame', is_flag=True, help="Frame with | and - rules")
@click.option('--border', default=None, callback=_single_char, help="Border character")
@click.option('--width', type=int, default=None, help="Pad or clip to this width")
@click.option('--depth', type=int, default=None, help="Pad or clip to this depth")
@click.option('--position', type=int, default=None, help="Leading-side share of padding, 0-100")
@click.option('--fill', default=None, callback=_single_char, help="Padding character")
def render(file, **flags):
    """Render a text file (or - for stdin) as a picture"""
    source = file.read()
    flags = {key: value for key, value in flags.items() if value is not None and value is not False}
    try:
        options = (RenderOptions.from_env()
                   .merged(parse_file_flags(source))
                   .merged(flags))
        picture = apply_options(Picture(strip_file_flags(source)), options)
    except TesseraError as e:
        _fail(e)
    painter.paint(picture)


@cli.command()
@click.argument('cells', nargs=-1, required=True)
@click.option('--row/--col', 'as_row', default=True, help="Lay cells out in a row or a column")
@click.option('--position', type=int, default=None, help="Alignment of cells, 0-100")
@click.option('--fill', default=' ', callback=_single_char, help="Padding character")
def table(cells, as_row, position, fill):
    """Render CELLS as a table; a literal \\n inside a cell breaks the line"""
    pictures = [Picture(cell.replace("\\n", "\n")) for cell in cells]
    try:
        if as_row:
            picture = table_row(pictures, TOP if position is None else position, fill)
        else:
            picture = table_col(pictures, CTR if position is None else position, fill)
    except TesseraError as e:
        _fail(e)
    painter.paint(picture)


@cli.command()
@click.argument('depth', type=int)
@click.argument('width', type=int)
@click.argument('fill', default='#', callback=_single_char)
@click.option('--frame', is_flag=True, help="Frame the box")
def box(depth, width, fill, frame):
    """Render a solid DEPTH x WIDTH box of FILL"""
    picture = box_picture(depth, width, fill)
    if frame:
        picture = picture.frame()
    painter.paint(picture)


@cli.command()
@click.argument('tiles', default="".join(SOLVED_TILES).replace(" ", "_"))
def board(tiles):
    """Render a 3x3 puzzle board from nine tile labels (_ is the blank)"""
    try:
        picture = board_picture(parse_tiles(tiles))
    except TesseraError as e:
        _fail(e)
    painter.paint(picture)


def _expand_args(args):
    """No arguments shows help; a lone ``*.txt`` path means ``render PATH``."""
    if not args:
        return ["--help"]
    if len(args) == 1 and args[0].endswith(".txt"):
        return ["render", args[0]]
    return list(args)


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    cli.main(args=_expand_args(args), prog_name="tessera")


if __name__ == "__main__":
    main()
