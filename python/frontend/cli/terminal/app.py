"""Full-screen terminal frontend — arrow keys slide tiles, Escape quits.

Two modes share one event loop. ``full`` starts shuffled, clears before
every redraw, follows terminal resizes, and checks for a win on every
pass. ``reduced`` starts from the solved layout, never checks for a win,
draws over the previous frame, only resynchronises on resize, and echoes
each arrow key's direction to stdout.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from rich.console import Console

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.board import Direction
from frontend.cli.terminal.render import (
    board_origin,
    display_winning_message,
    draw_board,
)
from frontend.cli.terminal.screen import (
    CursesScreen,
    Key,
    KeyEvent,
    ResizeEvent,
    Screen,
    TerminalInitError,
)

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


class Mode(StrEnum):
    full = "full"
    reduced = "reduced"


_DIRECTIONS: dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


def _echo_direction(direction: Direction) -> None:
    console.print(direction.value.capitalize(), highlight=False)


# -- event loop ---------------------------------------------------------------


def run_loop(
    screen: Screen,
    game: GamePlay,
    mode: Mode = Mode.full,
    echo: Callable[[Direction], None] | None = None,
) -> None:
    """Drive *game* from *screen* events until Escape is pressed."""
    full = mode is Mode.full
    board = game.board
    origin = board_origin(board, *screen.size())
    draw_board(screen, board, *origin, clear=full)

    while True:
        # Nothing else redraws the message, so repeat it on every pass
        if full and game.check_won():
            display_winning_message(screen, board)

        event = screen.poll_event()

        if isinstance(event, ResizeEvent):
            logger.debug("Terminal resized to %dx%d", event.width, event.height)
            if full:
                origin = board_origin(board, event.width, event.height)
                draw_board(screen, board, *origin)
            else:
                screen.sync()

        elif isinstance(event, KeyEvent):
            if event.key is Key.ESCAPE:
                return
            direction = _DIRECTIONS.get(event.key)
            if direction is None or game.is_won:
                continue
            if echo is not None:
                echo(direction)
            if game.move(direction):
                draw_board(screen, board, *origin, clear=full)


# -- public entry point -------------------------------------------------------


def new_game(mode: Mode, seed: int | None = None, solvable: bool = False) -> GamePlay:
    """Build the starting session for *mode*."""
    if mode is Mode.reduced:
        if seed is not None or solvable:
            logger.warning(
                "Reduced mode starts from the solved board; "
                "seed and solvable are ignored"
            )
        return GamePlay.from_board(GameGenerator.ordered())

    game = GamePlay(seed=seed, solvable=solvable)
    logger.info(
        "New %s board (seed=%s, solvable layout=%s)",
        "scrambled" if solvable else "shuffled",
        seed,
        Solver.is_solvable(game.board),
    )
    return game


def run(
    mode: Mode = Mode.full,
    seed: int | None = None,
    solvable: bool = False,
    screen: Screen | None = None,
) -> int:
    """Play one session in the terminal. Returns the process exit status."""
    game = new_game(mode, seed=seed, solvable=solvable)
    screen = screen if screen is not None else CursesScreen()

    try:
        screen.init()
    except TerminalInitError as exc:
        logger.error("%s", exc)
        err_console.print(str(exc), style="red", markup=False, highlight=False)
        return 1

    try:
        run_loop(
            screen,
            game,
            mode,
            echo=_echo_direction if mode is Mode.reduced else None,
        )
    except KeyboardInterrupt:
        logger.info("Interrupted, leaving the terminal")
    finally:
        screen.fini()
    return 0
