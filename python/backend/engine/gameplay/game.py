"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import logging

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameState
from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)

# Offset from the blank to the tile that slides into it.
# UP    → tile below the blank moves up     → blank shifts down
# DOWN  → tile above the blank moves down   → blank shifts up
# LEFT  → tile right of the blank moves left → blank shifts right
# RIGHT → tile left of the blank moves right → blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (1, 0),
    Direction.RIGHT: (-1, 0),
}


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, seed: int | None = None, solvable: bool = False) -> None:
        if solvable:
            board = GameGenerator.generate_solvable(seed=seed)
        else:
            board = GameGenerator.generate(seed=seed)
        self.state = GameState(board)

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj.state = GameState(board)
        return obj

    @property
    def board(self) -> Board:
        return self.state.board

    # -- movement (direction = where the *tile* moves) ------------------------

    def target(self, direction: Direction) -> tuple[int, int]:
        """Return the position of the tile that *direction* would slide."""
        ex, ey = self.state.empty_pos
        dx, dy = _OFFSETS[direction]
        return ex + dx, ey + dy

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was applied. Moves off the board, and
        any move after the puzzle is won, are ignored.
        """
        if self.state.is_won:
            return False

        board = self.state.board
        tx, ty = self.target(direction)
        if not board.in_bounds(tx, ty):
            logger.debug("Ignored %s: no tile at (%d, %d)", direction, tx, ty)
            return False

        board.swap(*self.state.empty_pos, tx, ty)
        self.state.empty_pos = (tx, ty)
        self.state.increment_moves()
        logger.debug("Moved %s, blank now at (%d, %d)", direction, tx, ty)
        return True

    # -- queries --------------------------------------------------------------

    def check_won(self) -> bool:
        """Run the win check, entering the won phase the first time it holds."""
        if not self.state.is_won and self.state.board.is_solved():
            self.state.mark_won()
            logger.info("Puzzle solved after %d moves", self.state.moves)
        return self.state.is_won

    @property
    def is_won(self) -> bool:
        return self.state.is_won
