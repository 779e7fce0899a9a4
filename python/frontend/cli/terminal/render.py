"""Draws the board and the win message onto a :class:`Screen`."""

from __future__ import annotations

from backend.config import EXIT_HINT, TILE_HEIGHT, TILE_WIDTH, WIN_MESSAGE
from backend.models.board import Board
from backend.models.tile import Tile
from frontend.cli.terminal.screen import Screen, emit_str


def board_origin(board: Board, screen_w: int, screen_h: int) -> tuple[int, int]:
    """Return the top-left cell that centres *board* on the screen."""
    return (
        (screen_w - board.width * TILE_WIDTH) >> 1,
        (screen_h - board.height * TILE_HEIGHT) >> 1,
    )


def draw_tile(screen: Screen, tile: Tile, x: int, y: int) -> None:
    index = 0
    for cy in range(y, y + TILE_HEIGHT):
        for cx in range(x, x + TILE_WIDTH):
            screen.set_content(cx, cy, tile.cells[index])
            index += 1


def draw_board(
    screen: Screen, board: Board, x: int, y: int, clear: bool = True
) -> None:
    """Draw every tile with the board's top-left corner at (x, y).

    Without *clear*, cells outside the board keep whatever was drawn
    there before.
    """
    if clear:
        screen.clear()
    for sy in range(board.height):
        for sx in range(board.width):
            draw_tile(
                screen,
                board.get_tile(sx, sy),
                x + sx * TILE_WIDTH,
                y + sy * TILE_HEIGHT,
            )
    screen.show()


def display_winning_message(screen: Screen, board: Board) -> None:
    w, h = screen.size()
    row = (h + board.height * TILE_HEIGHT) // 2 + 5
    emit_str(screen, w // 2 - len(WIN_MESSAGE) // 2, row, WIN_MESSAGE)
    emit_str(screen, w // 2 - len(EXIT_HINT) // 2, row + 1, EXIT_HINT)
    screen.show()
