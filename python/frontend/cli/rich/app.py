"""Rich preview — prints the starting board once instead of playing it.

Uses the ``rich`` library for styled output; no full-screen terminal is
opened, so it also works in pipes and CI logs.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from backend.config import TILE_HEIGHT
from backend.engine.gamesolver import Solver
from backend.models.board import Board

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_tiles(board: Board) -> Text:
    """Return the board's glyph rows as one block of text."""
    text = Text(no_wrap=True)
    for y in range(board.height):
        for line in range(TILE_HEIGHT):
            for x in range(board.width):
                tile = board.get_tile(x, y)
                style = "dim" if tile.is_blank else "bold white"
                text.append(tile.rows()[line], style=style)
            if y < board.height - 1 or line < TILE_HEIGHT - 1:
                text.append("\n")
    return text


def render_board(board: Board) -> Panel:
    """Return a Rich Panel holding the board and a solvability note."""
    if board.is_solved():
        note = Text("Already solved.", style="green")
    elif Solver.is_solvable(board):
        note = Text("Solvable.", style="cyan")
    else:
        note = Text("Not solvable by sliding tiles.", style="yellow")

    return Panel(
        Group(Align.center(_render_tiles(board)), Text(""), Align.center(note)),
        title=f"[bold cyan]Letter Slide  {board.width}×{board.height}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
        expand=False,
    )


# -- public entry point -------------------------------------------------------


def run_preview(board: Board, target: Console | None = None) -> None:
    """Print *board* to *target* (stdout by default)."""
    (target or console).print(render_board(board))
